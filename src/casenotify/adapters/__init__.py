"""Adapters to the case-management backends and the delivery provider."""
