"""Delivered message value object."""

from .delivery import Delivery

__all__ = ["Delivery"]
