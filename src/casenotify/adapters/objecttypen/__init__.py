"""ObjectTypen query adapter."""

from __future__ import annotations

from .client import QueryObjectTypen

__all__ = ["QueryObjectTypen"]
