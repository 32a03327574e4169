"""Broker client for RabbitMQ topology management and consumption."""

from .broker_client import CONSUMER_TAG_PREFIX, AckErrorCallback, BrokerClient
from .broker_config import BrokerClientDependencies, BrokerConfig
from .queue_info import QueueInfo

__all__ = [
    "AckErrorCallback",
    "BrokerClient",
    "BrokerClientDependencies",
    "BrokerConfig",
    "CONSUMER_TAG_PREFIX",
    "QueueInfo",
]
