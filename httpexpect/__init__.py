"""Fluent HTTP request builder with a shared failure chain."""

from .chain import Chain, LoggerReporter, RequireReporter
from .expect import Expect
from .http_client import HttpClient
from .printer import CompactPrinter, DebugPrinter
from .request import Request
from .response import Response

__all__ = [
    "Chain",
    "CompactPrinter",
    "DebugPrinter",
    "Expect",
    "HttpClient",
    "LoggerReporter",
    "Request",
    "RequireReporter",
    "Response",
]
