"""
Custom exceptions for httpexpect
"""


class HttpExpectError(Exception):
    """Base exception for all httpexpect errors"""

    pass


class ExpectationFailed(HttpExpectError):
    """
    Raised by RequireReporter when a failure is recorded on a chain.

    This is the fatal presentation of a failure: the test (or caller) is
    aborted at the first failed step instead of continuing with no-ops.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TransportError(HttpExpectError):
    """
    Raised by a client when the request could not be executed.

    This includes:
    - Connection failures
    - Protocol errors
    - Any other failure before a response was received
    """

    def __init__(self, message: str, request=None):
        self.request = request
        super().__init__(message)


class ConfigurationError(HttpExpectError):
    """
    Raised when configuration values are missing or invalid.
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        if config_key:
            super().__init__(f"Configuration error for '{config_key}': {message}")
        else:
            super().__init__(f"Configuration error: {message}")
