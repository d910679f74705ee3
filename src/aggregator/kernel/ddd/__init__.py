"""DDD building blocks — public re-export surface."""

from aggregator.kernel.ddd.aggregate import AggregateRoot
from aggregator.kernel.ddd.domain_event import DomainEvent

__all__ = ["AggregateRoot", "DomainEvent"]
