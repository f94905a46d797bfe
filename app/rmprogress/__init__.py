"""rmprogress - Progress estimation for running file-deletion processes."""

__version__ = "0.1.0"
