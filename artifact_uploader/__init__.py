"""Upload a file to Dropbox and print a direct-download link for it."""

__version__ = "0.1.0"
