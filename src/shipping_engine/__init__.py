"""ArtAfrik shipping rate engine and its HTTP service."""

__version__ = "0.1.0"
