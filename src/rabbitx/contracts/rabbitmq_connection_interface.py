"""Defines the contract for RabbitMQ connections."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type

from pika.adapters.blocking_connection import BlockingChannel


class IRabbitMQConnection(ABC):
    """Represents an open RabbitMQ connection capable of producing blocking channels."""

    @abstractmethod
    def channel(self) -> BlockingChannel:
        """Open a new blocking channel on the connection."""

    @abstractmethod
    def close(self) -> None:
        """Close the connection and associated resources."""

    @property
    @abstractmethod
    def is_closed(self) -> bool:
        """Whether the underlying connection is closed."""

    @abstractmethod
    def __enter__(self) -> IRabbitMQConnection:
        """Enter a managed connection context."""

    @abstractmethod
    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        """Exit a managed connection context."""
