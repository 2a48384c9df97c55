"""Product category listings for the storefront page tree."""

__version__ = "0.1.0"
