"""
Request builder

Request collects method, URL, query parameters, headers and body through
chained calls, then expect() prepares the request, sends it through the
configured client and wraps the result in a Response handle.

Every failure goes through the request's Chain. Once the chain has failed,
configuration calls stay safe to make but expect() sends nothing.
"""

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, BinaryIO
from urllib.parse import parse_qsl, urlencode

import requests
from urllib3 import HTTPHeaderDict
from urllib3.exceptions import LocationParseError
from urllib3.util import Url, parse_url

from .chain import Chain
from .exceptions import TransportError
from .logging_config import get_module_logger
from .response import Response

logger = get_module_logger("request")

if TYPE_CHECKING:
    from .expect import Expect

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"

# content_length value for a streamed body of unknown size
UNKNOWN_LENGTH = -1


def concat_urls(base: str, path: str) -> str:
    """
    Join base URL and path with exactly one slash between them.

    If either side is empty, the other one is returned unchanged.

    Example:
        >>> concat_urls("http://example.org/", "/path")
        'http://example.org/path'
    """
    if not base:
        return path
    if not path:
        return base
    if base.endswith("/"):
        base = base[:-1]
    if path.startswith("/"):
        path = path[1:]
    return base + "/" + path


def to_query_string(value: Any) -> str:
    """Canonical string form of a query or header value"""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return str(value)


def to_json_bytes(obj: Any) -> bytes:
    """
    Serialize obj to compact UTF-8 JSON with sorted keys.

    Raises:
        TypeError: If obj contains values JSON can't represent
        ValueError: For NaN/Infinity or circular references
    """
    return json.dumps(
        obj, separators=(",", ":"), sort_keys=True, ensure_ascii=False, allow_nan=False
    ).encode("utf-8")


def parse_query(raw: str | None, strict: bool = False) -> dict[str, list[str]]:
    """
    Parse a raw query string into a multi-map.

    Args:
        raw: Query string without the leading "?" (None is treated as empty)
        strict: Raise ValueError on malformed pairs instead of skipping them

    Returns:
        Mapping of key to values, values in the order they appear
    """
    query: dict[str, list[str]] = {}
    if not raw:
        return query
    for key, value in parse_qsl(raw, keep_blank_values=True, strict_parsing=strict):
        query.setdefault(key, []).append(value)
    return query


def encode_query(query: dict[str, list[str]]) -> str:
    """Form-encode a multi-map, keys sorted, values kept in order"""
    return urlencode([(key, value) for key in sorted(query) for value in query[key]])


class StreamBody:
    """
    Lazy adapter over a caller-supplied readable stream.

    Iterating yields chunks so the transport sends the body chunked without
    knowing its length. Nothing is read until the transport asks for it.
    """

    chunk_size = 64 * 1024

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def read(self, size: int = -1) -> bytes:
        return _as_bytes(self.stream.read(size))

    def __iter__(self):
        while True:
            chunk = self.stream.read(self.chunk_size)
            if not chunk:
                return
            yield _as_bytes(chunk)

    def close(self):
        close = getattr(self.stream, "close", None)
        if close is not None:
            close()


def _as_bytes(chunk) -> bytes:
    if isinstance(chunk, str):
        return chunk.encode("utf-8")
    return chunk


class Request:
    """
    Incrementally built HTTP request.

    Example:
        >>> req = Request(expect, "PUT", "http://example.org/path")
        >>> req.with_query("foo", 123).with_query("bar", "baz")
        >>> resp = req.expect()
        # URL sent: http://example.org/path?bar=baz&foo=123
    """

    def __init__(self, config: "Expect", method: str, urlfmt: str, *args: Any):
        """
        Args:
            config: Expect instance supplying base_url, client, printer and reporter
            method: HTTP method (GET, POST, PUT, etc.)
            urlfmt: URL or path, %-formatted with args when args are given
            *args: Values for the placeholders in urlfmt; None is rejected
        """
        self.config = config
        self.chain = Chain(config.reporter)
        self.method = method
        self.headers = HTTPHeaderDict()

        self._url: Url | None = None
        self._query: dict[str, list[str]] | None = None
        self._body: bytes | StreamBody | None = None
        self._content_length = 0
        self._sent = False

        for arg in args:
            if arg is None:
                self.chain.fail(
                    'unexpected None argument for url format string:\n  Request("%s", %r...)',
                    method,
                    list(args),
                )
                break

        try:
            path = urlfmt % args if args else urlfmt
        except (TypeError, ValueError) as e:
            self.chain.fail(f"can't format url {urlfmt!r} with {list(args)!r}: {e}")
            return

        self._url = self._parse_url(concat_urls(config.base_url, path))

    def _parse_url(self, raw_url: str) -> Url | None:
        try:
            url = parse_url(raw_url)
        except LocationParseError as e:
            self.chain.fail(str(e))
            return None
        if not url.scheme or not url.host:
            self.chain.fail(f"url is not absolute: {raw_url!r}")
            return None
        return url

    @property
    def url(self) -> str | None:
        """Target URL with any added query parameters encoded"""
        if self._url is None:
            return None
        return self._final_url().url

    @property
    def body(self) -> bytes | StreamBody | None:
        return self._body

    @property
    def content_length(self) -> int:
        """Exact body length, 0 for no body, UNKNOWN_LENGTH for a stream"""
        return self._content_length

    def _materialized_query(self) -> dict[str, list[str]]:
        if self._query is None:
            raw = self._url.query if self._url is not None else None
            self._query = parse_query(raw)
        return self._query

    def _final_url(self) -> Url:
        if self._query is None:
            return self._url
        return self._url._replace(query=encode_query(self._query) or None)

    def with_query(self, key: str, value: Any) -> "Request":
        """
        Add a query parameter to the request URL.

        Repeated keys keep every value. Any query string already present in
        the URL template is preserved.
        """
        self._materialized_query().setdefault(key, []).append(to_query_string(value))
        return self

    def with_query_string(self, query: str) -> "Request":
        """Add every parameter of a raw query string, e.g. "a=1&b=2" """
        try:
            parsed = parse_query(query, strict=True)
        except ValueError as e:
            self.chain.fail(f"invalid query string {query!r}: {e}")
            return self

        target = self._materialized_query()
        for key, values in parsed.items():
            target.setdefault(key, []).extend(values)
        return self

    def with_header(self, key: str, value: Any) -> "Request":
        """Add a header value; existing values for the same key are kept."""
        self.headers.add(key, to_query_string(value))
        return self

    def with_headers(self, headers: Mapping[str, Any]) -> "Request":
        """Add every header from a mapping, see with_header()."""
        for key, value in headers.items():
            self.with_header(key, value)
        return self

    def with_body(self, stream: BinaryIO | None) -> "Request":
        """
        Use a readable stream as the request body.

        The stream is sent as-is by the transport, with no known length.
        None removes any body.
        """
        if stream is None:
            return self._clear_body()
        if not callable(getattr(stream, "read", None)):
            self.chain.fail(f"with_body expects a readable stream, got {type(stream).__name__}")
            return self
        self._body = StreamBody(stream)
        self._content_length = UNKNOWN_LENGTH
        return self

    def with_bytes(self, data: bytes | bytearray | None) -> "Request":
        """Like with_body(), but takes the whole body as bytes."""
        if data is None:
            return self._clear_body()
        self._body = bytes(data)
        self._content_length = len(self._body)
        return self

    def with_text(self, text: str) -> "Request":
        """Set a UTF-8 text body and a text/plain Content-Type"""
        self.with_header("Content-Type", TEXT_CONTENT_TYPE)
        return self.with_bytes(text.encode("utf-8"))

    def with_json(self, obj: Any) -> "Request":
        """
        Set the body to obj serialized as JSON and add a JSON Content-Type.

        If obj can't be serialized, the failure is recorded and the request
        is left as it was.
        """
        try:
            data = to_json_bytes(obj)
        except (TypeError, ValueError) as e:
            self.chain.fail(str(e))
            return self

        self.with_header("Content-Type", JSON_CONTENT_TYPE)
        return self.with_bytes(data)

    def _clear_body(self) -> "Request":
        self._body = None
        self._content_length = 0
        return self

    def expect(self) -> Response:
        """
        Send the request and return a Response handle for it.

        Nothing is sent if a failure was recorded earlier; the handle then
        has no raw response.
        """
        return Response(self.chain, self._send())

    def _send(self) -> requests.Response | None:
        if self.chain.failed():
            logger.debug(f"Skipping {self.method} request: failure already recorded")
            return None

        if self._sent:
            self.chain.fail(f"{self.method} request was already sent")
            return None
        self._sent = True

        try:
            prepared = requests.Request(
                method=self.method,
                url=self._final_url().url,
                headers=dict(self.headers.itermerged()),
                data=self._body,
            ).prepare()
        except requests.exceptions.RequestException as e:
            self.chain.fail(str(e))
            return None

        printer = self.config.printer
        if printer is not None:
            printer.request(prepared)

        logger.debug(f"Sending {prepared.method} {prepared.url}")
        try:
            resp = self.config.client.do(prepared)
        except (requests.exceptions.RequestException, TransportError) as e:
            self.chain.fail(str(e))
            return None

        if printer is not None:
            printer.response(resp)

        return resp
