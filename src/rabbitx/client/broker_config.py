"""Configuration primitives for wiring a `BrokerClient`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from rabbitx.connection import RabbitMQConnection, build_amqp_url
from rabbitx.contracts import IRabbitMQConnection


@dataclass(frozen=True)
class BrokerConfig:
    """Credentials and address of the broker.

    All fields are plain strings and are passed to the AMQP URI unchanged.
    """

    username: str
    password: str
    host: str
    port: str

    @property
    def url(self) -> str:
        return build_amqp_url(self.username, self.password, self.host, self.port)


def _connect(config: BrokerConfig) -> IRabbitMQConnection:
    return RabbitMQConnection(config.username, config.password, config.host, config.port)


@dataclass(frozen=True)
class BrokerClientDependencies:
    """Bundles factory functions for client wiring."""

    make_connection: Callable[[BrokerConfig], IRabbitMQConnection] = field(default=_connect)
