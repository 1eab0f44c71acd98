"""Product catalog data-access layer."""

__version__ = "1.2.0"
