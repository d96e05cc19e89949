"""feedstamp - build RSS feeds from placeholder templates."""

__version__ = "0.1.0"
