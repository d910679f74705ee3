"""Application event – handler port and dispatcher."""
from aggregator.application.event.dispatcher import EventDispatcher
from aggregator.application.event.handler import EventHandler, handler_collection_type

__all__ = ["EventDispatcher", "EventHandler", "handler_collection_type"]
