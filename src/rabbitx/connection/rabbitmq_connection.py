"""RabbitMQ connection management."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Optional, Type

import pika
from pika.adapters.blocking_connection import BlockingChannel, BlockingConnection
from pika.connection import Parameters

from rabbitx.contracts import IRabbitMQConnection
from rabbitx.exceptions import BrokerConnectionError, ChannelError

AMQP_URL_FORMAT = "amqp://{username}:{password}@{host}:{port}/"


def build_amqp_url(username: str, password: str, host: str, port: str) -> str:
    """Return the AMQP URI for the given credentials and address.

    Values are inserted verbatim; no escaping or validation is applied.
    """
    return AMQP_URL_FORMAT.format(
        username=username,
        password=password,
        host=host,
        port=port,
    )


class RabbitMQConnection(IRabbitMQConnection):
    """Owns a single blocking RabbitMQ connection opened at construction time.

    The connection is never re-established: once it drops, every further
    ``channel()`` call fails with :class:`ChannelError`.
    """

    def __init__(self, username: str, password: str, host: str, port: str) -> None:
        self.logger = logging.getLogger(__name__)
        self.rabbitmq_url = build_amqp_url(username, password, host, port)

        try:
            self._parameters: Parameters = pika.URLParameters(self.rabbitmq_url)
        except ValueError as exc:
            raise ValueError(f"Invalid RabbitMQ address provided: {host}:{port}") from exc

        self.logger.info("Connecting to RabbitMQ at %s:%s", host, port)
        try:
            self.connection: BlockingConnection = pika.BlockingConnection(self._parameters)
        except pika.exceptions.AMQPConnectionError as exc:
            self.logger.error("Failed to establish RabbitMQ connection: %s", exc)
            raise BrokerConnectionError(
                f"Could not connect to RabbitMQ at {host}:{port}"
            ) from exc
        self.logger.info("Connected to RabbitMQ.")

    @property
    def is_closed(self) -> bool:
        return bool(self.connection.is_closed)

    def channel(self) -> BlockingChannel:
        try:
            channel = self.connection.channel()
        except pika.exceptions.AMQPError as exc:
            self.logger.error("Failed to open RabbitMQ channel: %s", exc)
            raise ChannelError("Could not open a channel on the RabbitMQ connection") from exc

        self.logger.debug("Opened channel %s", channel.channel_number)
        return channel

    def close(self) -> None:
        if not self.connection.is_closed:
            self.connection.close()
            self.logger.info("Closed RabbitMQ connection.")

    def __enter__(self) -> RabbitMQConnection:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()
