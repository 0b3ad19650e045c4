"""Small command-line text, file-indexing and display utilities."""

__version__ = "1.0.0"