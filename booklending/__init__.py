"""Lending library manager: books, readers, loans, a plain-text data file and a console menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]