"""Objects API query adapter."""

from __future__ import annotations

from .client import QueryObjecten

__all__ = ["QueryObjecten"]
