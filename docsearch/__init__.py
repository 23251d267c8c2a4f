"""Document loading, text normalisation and exact pattern search."""

__version__ = "1.0.0"