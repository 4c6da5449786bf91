"""Adapters bridging collectors to other libraries."""

from requestbar.adapters.logging import MessagesHandler

__all__ = [
    "MessagesHandler",
]
