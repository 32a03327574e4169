"""Errors raised by the rabbitx broker client."""


class RabbitxError(Exception):
    """Base class for all broker client errors."""


class BrokerConnectionError(RabbitxError):
    """The broker could not be reached or rejected the credentials."""


class ChannelError(RabbitxError):
    """A channel could not be opened on the connection."""


class DeclareError(RabbitxError):
    """An exchange or queue declaration was rejected by the broker."""


class BindError(RabbitxError):
    """A queue binding was rejected by the broker."""


class ConsumeError(RabbitxError):
    """A consumer could not be registered on a queue."""
