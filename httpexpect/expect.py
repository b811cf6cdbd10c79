"""
Entry point for building requests

Expect carries everything a Request needs from its surroundings: the base
URL, the transport client, an optional printer and the failure reporter.
Anything not passed explicitly is taken from the config object.
"""

from typing import Any

from .chain import LoggerReporter, Reporter, RequireReporter
from .config import Config, config
from .exceptions import ConfigurationError
from .http_client import HttpClient, default_http_client
from .printer import Printer, make_printer
from .request import Request

_UNSET: Any = object()


class Expect:
    """
    Factory for Request objects sharing one configuration

    Example:
        >>> e = Expect(base_url="http://localhost:8080")
        >>> resp = e.put("/users/%s", 42).with_json({"name": "bob"}).expect()
    """

    def __init__(
        self,
        base_url: str | None = None,
        client: Any = None,
        printer: Printer | None = _UNSET,
        reporter: Reporter | None = None,
        config_obj: Config | None = None,
    ):
        """
        Initialize Expect

        Args:
            base_url: Prefix joined to every request URL ("" for none)
            client: Transport with a do(request) method (built from config if None)
            printer: Request/response printer; None disables printing
                     (built from the "printer" setting if not given)
            reporter: Failure reporter (built from the "reporter" setting if None)
            config_obj: Config object (uses global config if None)
        """
        self.config = config_obj or config

        if base_url is None:
            base_url = self.config.get("base_url", "")
        self.base_url = base_url

        self.client = client or self._make_client()

        if printer is _UNSET:
            printer = make_printer(self.config.get("printer"))
        self.printer = printer

        self.reporter = reporter or self._make_reporter()

    def _make_client(self) -> Any:
        settings = self.config.client
        if not settings:
            return default_http_client

        client = HttpClient(timeout=settings.get("timeout"))
        headers = settings.get("headers")
        if headers:
            client.session.headers.update(headers)
        return client

    def _make_reporter(self) -> Reporter:
        kind = self.config.get("reporter", "logger")
        if kind == "logger":
            return LoggerReporter()
        if kind == "require":
            return RequireReporter()
        raise ConfigurationError(
            f"unknown reporter '{kind}' (expected logger or require)", config_key="reporter"
        )

    def request(self, method: str, urlfmt: str, *args: Any) -> Request:
        """Start building a request, see Request for the arguments."""
        return Request(self, method, urlfmt, *args)

    def get(self, urlfmt: str, *args: Any) -> Request:
        return self.request("GET", urlfmt, *args)

    def head(self, urlfmt: str, *args: Any) -> Request:
        return self.request("HEAD", urlfmt, *args)

    def post(self, urlfmt: str, *args: Any) -> Request:
        return self.request("POST", urlfmt, *args)

    def put(self, urlfmt: str, *args: Any) -> Request:
        return self.request("PUT", urlfmt, *args)

    def patch(self, urlfmt: str, *args: Any) -> Request:
        return self.request("PATCH", urlfmt, *args)

    def delete(self, urlfmt: str, *args: Any) -> Request:
        return self.request("DELETE", urlfmt, *args)

    def options(self, urlfmt: str, *args: Any) -> Request:
        return self.request("OPTIONS", urlfmt, *args)
