"""AI news digest: fetch, de-duplicate, translate and deliver."""

__version__ = "0.1.0"
