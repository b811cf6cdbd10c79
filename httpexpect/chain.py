"""
Failure chain shared by a request and the response handle it produces

Every failure detected while building or sending a request is funneled
through Chain.fail(). The chain only latches the failure; the reporter
decides how it is presented (logged, raised, collected).
"""

import logging
from typing import Protocol

from .exceptions import ExpectationFailed
from .logging_config import get_module_logger


class Reporter(Protocol):
    """Anything that can present a failure message"""

    def errorf(self, message: str) -> None: ...


class LoggerReporter:
    """
    Non-fatal reporter: logs failures at ERROR level and keeps them.

    Building and sending continue as no-ops after the first failure, so the
    caller can inspect `failures` afterwards.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or get_module_logger("reporter")
        self.failures: list[str] = []

    def errorf(self, message: str) -> None:
        self.failures.append(message)
        self.logger.error(message)


class RequireReporter:
    """Fatal reporter: raises ExpectationFailed on the first failure"""

    def errorf(self, message: str) -> None:
        raise ExpectationFailed(message)


class Chain:
    """Failure latch bound to a reporter"""

    def __init__(self, reporter: Reporter):
        self.reporter = reporter
        self._failed = False

    def fail(self, message: str, *args) -> None:
        """
        Record a failure.

        Only the first failure is reported; later calls are ignored once the
        latch is set.

        Args:
            message: Failure message, %-formatted with args when args are given
            *args: Values substituted into message
        """
        if self._failed:
            return
        self._failed = True
        self.reporter.errorf(message % args if args else message)

    def failed(self) -> bool:
        """Whether a failure has been recorded"""
        return self._failed
