"""tuiml command line interface."""
