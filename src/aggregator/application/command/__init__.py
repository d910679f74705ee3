"""Application command – context, hooks, handler port and processor."""
from aggregator.application.command.context import CORRELATION_ID, CommandHandlingContext, ContextKey
from aggregator.application.command.handler import Command, CommandHandler, command_handler_type
from aggregator.application.command.notification import CommandProcessorNotificationHandlers
from aggregator.application.command.processor import CommandProcessor

__all__ = [
    "CORRELATION_ID",
    "Command",
    "CommandHandler",
    "CommandHandlingContext",
    "CommandProcessor",
    "CommandProcessorNotificationHandlers",
    "ContextKey",
    "command_handler_type",
]
