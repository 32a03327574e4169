"""RabbitMQ connection management."""

from .rabbitmq_connection import RabbitMQConnection, build_amqp_url

__all__ = ["RabbitMQConnection", "build_amqp_url"]
