"""Quote orchestration."""

from .service import build_quote

__all__ = ["build_quote"]
