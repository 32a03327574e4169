import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

import pika
from pika.adapters.blocking_connection import BlockingChannel

from rabbitx.contracts import IMessageHandler, IRabbitMQConnection, MessageHandler
from rabbitx.delivery import Delivery
from rabbitx.exceptions import BindError, ConsumeError, DeclareError

from .broker_config import BrokerClientDependencies, BrokerConfig
from .queue_info import QueueInfo

CONSUMER_TAG_PREFIX = "consumer-of-"

AckErrorCallback = Callable[[Delivery, Exception], None]

# Errors that end a consume loop the same way a closed delivery stream does.
STREAM_CLOSED_ERRORS = (
    pika.exceptions.ChannelClosed,
    pika.exceptions.ConnectionClosed,
    pika.exceptions.StreamLostError,
)


class BrokerClient:
    """Declares topology on and consumes from a RabbitMQ broker over one connection.

    Every declare/bind call runs on its own short-lived channel which is closed
    before the call returns. ``consume`` keeps its channel open for as long as
    deliveries keep arriving.
    """

    def __init__(
        self,
        *,
        connection: IRabbitMQConnection,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.connection = connection

    @classmethod
    def from_config(
        cls,
        config: BrokerConfig,
        *,
        dependencies: Optional[BrokerClientDependencies] = None,
    ) -> "BrokerClient":
        deps = dependencies or BrokerClientDependencies()
        return cls(connection=deps.make_connection(config))

    @classmethod
    def from_credentials(
        cls,
        username: str,
        password: str,
        host: str,
        port: str,
        *,
        dependencies: Optional[BrokerClientDependencies] = None,
    ) -> "BrokerClient":
        config = BrokerConfig(username=username, password=password, host=host, port=port)
        return cls.from_config(config, dependencies=dependencies)

    def open_channel(self) -> BlockingChannel:
        return self.connection.channel()

    def declare_exchange(self, exchange_name: str, exchange_type: str) -> None:
        with self._one_shot_channel() as channel:
            try:
                channel.exchange_declare(
                    exchange=exchange_name,
                    exchange_type=exchange_type,
                    passive=False,
                    durable=True,
                    auto_delete=False,
                    internal=False,
                    arguments=None,
                )
            except pika.exceptions.AMQPError as exc:
                self.logger.error("Failed to declare exchange %s: %s", exchange_name, exc)
                raise DeclareError(f"Could not declare exchange {exchange_name!r}") from exc

        self.logger.debug("Declared %s exchange %s", exchange_type, exchange_name)

    def declare_queue(self, queue_name: str) -> QueueInfo:
        with self._one_shot_channel() as channel:
            try:
                frame = channel.queue_declare(
                    queue=queue_name,
                    passive=False,
                    durable=True,
                    exclusive=False,
                    auto_delete=False,
                    arguments=None,
                )
            except pika.exceptions.AMQPError as exc:
                self.logger.error("Failed to declare queue %s: %s", queue_name, exc)
                raise DeclareError(f"Could not declare queue {queue_name!r}") from exc

        info = QueueInfo(
            name=frame.method.queue,
            message_count=frame.method.message_count,
            consumer_count=frame.method.consumer_count,
        )
        self.logger.debug(
            "Declared queue %s (messages=%s, consumers=%s)",
            info.name,
            info.message_count,
            info.consumer_count,
        )
        return info

    def bind(self, queue_name: str, exchange_name: str, routing_key: str) -> None:
        with self._one_shot_channel() as channel:
            try:
                channel.queue_bind(
                    queue=queue_name,
                    exchange=exchange_name,
                    routing_key=routing_key,
                    arguments=None,
                )
            except pika.exceptions.AMQPError as exc:
                self.logger.error(
                    "Failed to bind queue %s to exchange %s with routing key %s: %s",
                    queue_name,
                    exchange_name,
                    routing_key,
                    exc,
                )
                raise BindError(
                    f"Could not bind queue {queue_name!r} to exchange {exchange_name!r}"
                ) from exc

        self.logger.debug(
            "Bound queue %s to exchange %s with routing key %s",
            queue_name,
            exchange_name,
            routing_key,
        )

    def consume(
        self,
        queue_name: str,
        auto_ack: bool,
        handler: MessageHandler,
        *,
        on_ack_error: Optional[AckErrorCallback] = None,
    ) -> None:
        """Consume ``queue_name`` until the delivery stream ends.

        Each delivery is passed to ``handler`` and, unless ``auto_ack`` is set,
        acknowledged once the handler returns. Failed acks are logged and
        reported to ``on_ack_error`` but do not stop the loop.
        """
        handle = handler.handle if isinstance(handler, IMessageHandler) else handler

        def on_message(
            channel: BlockingChannel,
            method: pika.spec.Basic.Deliver,
            properties: pika.spec.BasicProperties,
            body: bytes,
        ) -> None:
            delivery = Delivery(channel=channel, method=method, properties=properties, body=body)
            handle(delivery)
            if not auto_ack:
                self._ack(queue_name, delivery, on_ack_error)

        channel = self.open_channel()
        try:
            try:
                channel.basic_consume(
                    queue=queue_name,
                    on_message_callback=on_message,
                    auto_ack=auto_ack,
                    exclusive=False,
                    consumer_tag=CONSUMER_TAG_PREFIX + queue_name,
                    arguments=None,
                )
            except pika.exceptions.AMQPError as exc:
                self.logger.error("Failed to start consuming from %s: %s", queue_name, exc)
                raise ConsumeError(f"Could not consume from queue {queue_name!r}") from exc

            self.logger.info("Started consuming from %s", queue_name)
            try:
                channel.start_consuming()
            except KeyboardInterrupt:
                self.logger.info("Stopping consumer...")
                if channel.is_open:
                    channel.stop_consuming()
            except STREAM_CLOSED_ERRORS as exc:
                self.logger.warning("Delivery stream for %s closed: %s", queue_name, exc)

            self.logger.info("Stopped consuming from %s", queue_name)
        finally:
            self._release_channel(channel)

    def close(self) -> None:
        self.connection.close()

    def __enter__(self) -> "BrokerClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @contextmanager
    def _one_shot_channel(self) -> Iterator[BlockingChannel]:
        channel = self.open_channel()
        try:
            yield channel
        finally:
            self._release_channel(channel)

    def _release_channel(self, channel: BlockingChannel) -> None:
        # A broker-side failure closes the channel before we get here.
        if not channel.is_open:
            return
        try:
            channel.close()
        except pika.exceptions.AMQPError as exc:
            self.logger.warning("Failed to close channel %s: %s", channel.channel_number, exc)

    def _ack(
        self,
        queue_name: str,
        delivery: Delivery,
        on_ack_error: Optional[AckErrorCallback],
    ) -> None:
        try:
            delivery.ack()
        except pika.exceptions.AMQPError as exc:
            # TODO: decide whether a failed ack should abort the consume loop.
            self.logger.error(
                "Failed to ack delivery %s from %s: %s",
                delivery.delivery_tag,
                queue_name,
                exc,
            )
            if on_ack_error is not None:
                on_ack_error(delivery, exc)
