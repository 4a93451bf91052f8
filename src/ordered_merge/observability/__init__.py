from .messages import LEVELS, LogMessage
from .sinks import JsonlLogSink, MemoryLogSink

__all__ = [
    "LEVELS",
    "JsonlLogSink",
    "LogMessage",
    "MemoryLogSink",
]
