"""Contract interfaces for the broker client."""

from .message_handler_interface import IMessageHandler, MessageHandler
from .rabbitmq_connection_interface import IRabbitMQConnection

__all__ = [
    "IMessageHandler",
    "IRabbitMQConnection",
    "MessageHandler",
]
