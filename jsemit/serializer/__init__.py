"""Serializer facade."""

from jsemit.serializer.serializer import Serializer

__all__ = ["Serializer"]
