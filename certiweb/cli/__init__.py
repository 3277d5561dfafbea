"""certiweb command-line interface."""
