"""Color Service: HTTP color utilities built on FastAPI."""

__version__ = "1.0.0"
