"""Observability – structured logging setup."""
from aggregator.observability.logging import configure_logging

__all__ = ["configure_logging"]
