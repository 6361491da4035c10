"""Read EPUB books: table of contents, chapter text and a terminal reader."""

__version__ = "0.1.0"
__all__ = ["parser", "reader"]