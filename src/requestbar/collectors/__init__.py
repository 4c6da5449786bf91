"""Collectors accumulating data over one request."""

from requestbar.collectors.base import DataCollector
from requestbar.collectors.messages import MessagesCollector
from requestbar.collectors.timing import TimeDataCollector

__all__ = [
    "DataCollector",
    "MessagesCollector",
    "TimeDataCollector",
]
