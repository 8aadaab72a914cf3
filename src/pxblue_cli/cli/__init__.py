"""pxb command-line interface."""
