"""NotifyNL delivery adapter and receipt callback parser."""

from __future__ import annotations

from .client import NotifyNLClient, build_notify_client_factory, create_bearer_token
from .receipt import parse_delivery_receipt

__all__ = [
    "NotifyNLClient",
    "build_notify_client_factory",
    "create_bearer_token",
    "parse_delivery_receipt",
]
