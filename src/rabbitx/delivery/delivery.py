"""A message delivered to a consumer."""

from __future__ import annotations

from dataclasses import dataclass

from pika.adapters.blocking_connection import BlockingChannel
from pika.spec import Basic, BasicProperties


@dataclass(frozen=True)
class Delivery:
    """One message handed to a consumer together with its broker metadata.

    ``delivery_tag`` is scoped to ``channel``; the delivery can only be
    acknowledged on the channel it arrived on.
    """

    channel: BlockingChannel
    method: Basic.Deliver
    properties: BasicProperties
    body: bytes

    @property
    def delivery_tag(self) -> int:
        return int(self.method.delivery_tag)

    @property
    def routing_key(self) -> str:
        return str(self.method.routing_key)

    @property
    def exchange(self) -> str:
        return str(self.method.exchange)

    @property
    def consumer_tag(self) -> str:
        return str(self.method.consumer_tag)

    @property
    def redelivered(self) -> bool:
        return bool(self.method.redelivered)

    def ack(self) -> None:
        """Acknowledge this delivery only, never a batch."""
        self.channel.basic_ack(delivery_tag=self.delivery_tag, multiple=False)
