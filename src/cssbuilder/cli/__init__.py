"""cssbuilder command-line interface."""
