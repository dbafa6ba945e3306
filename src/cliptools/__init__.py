"""cliptools — read, list and write the system clipboard from the command line."""
