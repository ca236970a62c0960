"""Besluiten API query adapter."""

from __future__ import annotations

from .client import QueryBesluiten

__all__ = ["QueryBesluiten"]
