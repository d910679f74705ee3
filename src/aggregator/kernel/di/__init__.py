"""Dependency-resolution ports."""
from aggregator.kernel.di.ports import ServiceScope, ServiceScopeFactory

__all__ = ["ServiceScope", "ServiceScopeFactory"]
