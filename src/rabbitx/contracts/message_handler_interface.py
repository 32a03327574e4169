"""Defines the contract for handling consumed deliveries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Union

if TYPE_CHECKING:
    from rabbitx.delivery import Delivery


class IMessageHandler(ABC):
    """Handles one delivered message.

    Handlers never acknowledge deliveries themselves; the client acks after
    ``handle`` returns unless the consumer runs in auto-ack mode.
    """

    @abstractmethod
    def handle(self, delivery: Delivery) -> None:
        """Process a single delivery."""


MessageHandler = Union[IMessageHandler, Callable[["Delivery"], None]]
