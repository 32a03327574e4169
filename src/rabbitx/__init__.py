"""Thin RabbitMQ wrapper for declaring topology and consuming messages."""

from .client import (
    CONSUMER_TAG_PREFIX,
    BrokerClient,
    BrokerClientDependencies,
    BrokerConfig,
    QueueInfo,
)
from .connection import RabbitMQConnection, build_amqp_url
from .contracts import IMessageHandler, IRabbitMQConnection, MessageHandler
from .delivery import Delivery
from .exceptions import (
    BindError,
    BrokerConnectionError,
    ChannelError,
    ConsumeError,
    DeclareError,
    RabbitxError,
)

__all__ = [
    "BrokerClient",
    "BrokerClientDependencies",
    "BrokerConfig",
    "QueueInfo",
    "CONSUMER_TAG_PREFIX",
    "RabbitMQConnection",
    "build_amqp_url",
    "IMessageHandler",
    "IRabbitMQConnection",
    "MessageHandler",
    "Delivery",
    "RabbitxError",
    "BrokerConnectionError",
    "ChannelError",
    "DeclareError",
    "BindError",
    "ConsumeError",
]
