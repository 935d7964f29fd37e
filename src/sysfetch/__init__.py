"""sysfetch - print a short summary of the local system next to a banner."""

__version__ = "1.0.0"
