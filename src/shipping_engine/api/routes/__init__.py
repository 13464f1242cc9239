"""Route group exports."""

from . import health, shipping, zones

__all__ = ["health", "shipping", "zones"]
