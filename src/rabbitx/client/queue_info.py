"""Describes a queue as reported by the broker."""

from dataclasses import dataclass


@dataclass(frozen=True)
class QueueInfo:
    """Result of a queue declaration."""

    name: str
    message_count: int
    consumer_count: int
