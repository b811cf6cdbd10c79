"""
Request/response printers

A printer is told about every request right before it is sent and about
every response received. Printers only read what they are given.
"""

import logging
from typing import Protocol

import requests

from .exceptions import ConfigurationError
from .logging_config import get_module_logger


class Printer(Protocol):
    def request(self, request: requests.PreparedRequest) -> None: ...

    def response(self, response: requests.Response) -> None: ...


class CompactPrinter:
    """Logs one line per request and per response"""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or get_module_logger("printer")

    def request(self, request: requests.PreparedRequest) -> None:
        self.logger.info(f"{request.method} {request.url}")

    def response(self, response: requests.Response) -> None:
        self.logger.info(f"{response.status_code} {response.reason or ''}".rstrip())


class DebugPrinter:
    """
    Logs full request and response dumps: start line, headers and body.

    Streamed request bodies are not read (the transport consumes them), so
    they show up as a placeholder.
    """

    def __init__(self, logger: logging.Logger | None = None, body: bool = True):
        """
        Args:
            logger: Logger to write to (defaults to the "httpexpect.printer" logger)
            body: Whether to include bodies in the dump
        """
        self.logger = logger or get_module_logger("printer")
        self.body = body

    def request(self, request: requests.PreparedRequest) -> None:
        lines = [f"{request.method} {request.url}"]
        lines.extend(f"{k}: {v}" for k, v in request.headers.items())
        if self.body and request.body is not None:
            lines.append("")
            lines.append(_format_body(request.body))
        self.logger.info("\n".join(lines))

    def response(self, response: requests.Response) -> None:
        lines = [f"{response.status_code} {response.reason or ''}".rstrip()]
        lines.extend(f"{k}: {v}" for k, v in response.headers.items())
        if self.body and response.content:
            lines.append("")
            lines.append(_format_body(response.content))
        self.logger.info("\n".join(lines))


def _format_body(body) -> str:
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    if isinstance(body, str):
        return body
    return "<streamed body>"


def make_printer(mode: str | None, logger: logging.Logger | None = None) -> Printer | None:
    """
    Build a printer from its configured name

    Args:
        mode: "compact", "debug", or None/"none" for no printer

    Raises:
        ConfigurationError: If the mode is unknown
    """
    if mode is None or mode == "none":
        return None
    if mode == "compact":
        return CompactPrinter(logger)
    if mode == "debug":
        return DebugPrinter(logger)
    raise ConfigurationError(
        f"unknown printer '{mode}' (expected none, compact or debug)", config_key="printer"
    )
