from cliptools.presentation.cli.app import app

app(prog_name="cliptools")
