"""PX Blue CLI - scaffold framework projects with PX Blue integrated."""

__version__ = "0.4.0"
