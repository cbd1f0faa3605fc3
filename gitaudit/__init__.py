"""Find git repositories that are not safely backed up to a remote."""

__version__ = "0.1.0"
