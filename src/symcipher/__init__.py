"""symcipher — toy 27-symbol substitution cipher CLI."""

__version__ = "0.1.0"
