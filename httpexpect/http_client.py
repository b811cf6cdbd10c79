"""HTTP client abstraction used as the transport for prepared requests."""

from typing import Any

import requests


class HttpClient:
    """
    Transport that sends prepared requests through a requests.Session.

    This abstraction enables:
    - Dependency injection for testing
    - Easy mocking in unit tests
    - Centralized transport configuration (timeouts, session headers)
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float | None = None,
        **send_kwargs: Any,
    ):
        """
        Initialize the client

        Args:
            session: Session to send through (a new one is created if None)
            timeout: Optional request timeout in seconds
            **send_kwargs: Additional arguments to pass to Session.send()
        """
        self.session = session or requests.Session()
        self.timeout = timeout
        self.send_kwargs = send_kwargs

    def do(self, request: requests.PreparedRequest) -> requests.Response:
        """
        Send a prepared request.

        Session headers (e.g. configured client.headers) are added where the
        request doesn't set them already. A streamed body is closed once the
        send is over, whether it succeeded or not.

        Args:
            request: Fully assembled request (method, absolute URL, headers, body)

        Returns:
            requests.Response object

        Raises:
            requests.exceptions.RequestException: If the request could not be executed
        """
        for key, value in self.session.headers.items():
            if value is not None and key not in request.headers:
                request.headers[key] = value

        try:
            return self.session.send(request, timeout=self.timeout, **self.send_kwargs)
        finally:
            close = getattr(request.body, "close", None)
            if close is not None:
                close()


# Create a default instance for callers that don't bring their own
default_http_client = HttpClient()
