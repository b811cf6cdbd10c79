"""
Tests for expect.py - the request factory and its config defaults
"""

from unittest.mock import Mock

import pytest

from httpexpect.chain import LoggerReporter, RequireReporter
from httpexpect.config import Config
from httpexpect.exceptions import ConfigurationError
from httpexpect.expect import Expect
from httpexpect.http_client import HttpClient, default_http_client
from httpexpect.printer import CompactPrinter, DebugPrinter
from tests.test_helpers import CapturingAdapter, sent_request


class TestShortcuts:
    """Test the per-method shortcuts"""

    @pytest.mark.parametrize(
        "shortcut,method",
        [
            ("get", "GET"),
            ("head", "HEAD"),
            ("post", "POST"),
            ("put", "PUT"),
            ("patch", "PATCH"),
            ("delete", "DELETE"),
            ("options", "OPTIONS"),
        ],
    )
    def test_shortcut_sets_method(self, expect, shortcut, method):
        req = getattr(expect, shortcut)("http://example.org/items/%d", 3)

        assert req.method == method
        assert req.url == "http://example.org/items/3"

    def test_requests_share_collaborators_but_not_chains(self, expect):
        first = expect.get("http://example.org/%s", None)
        second = expect.get("http://example.org/ok")

        assert first.chain.failed()
        assert not second.chain.failed()
        assert first.config is second.config is expect


class TestConfigDefaults:
    """Test collaborators built from the config object"""

    def test_explicit_arguments_win(self):
        client = Mock()
        reporter = RequireReporter()
        config = Config({"base_url": "http://from-config", "printer": "debug"})

        e = Expect(
            base_url="http://explicit",
            client=client,
            printer=None,
            reporter=reporter,
            config_obj=config,
        )

        assert e.base_url == "http://explicit"
        assert e.client is client
        assert e.printer is None
        assert e.reporter is reporter

    def test_empty_config_defaults(self):
        e = Expect(config_obj=Config({}))

        assert e.base_url == ""
        assert e.client is default_http_client
        assert e.printer is None
        assert isinstance(e.reporter, LoggerReporter)

    def test_values_from_config(self):
        config = Config(
            {"base_url": "http://localhost:8080", "printer": "compact", "reporter": "require"}
        )

        e = Expect(config_obj=config)

        assert e.base_url == "http://localhost:8080"
        assert isinstance(e.printer, CompactPrinter)
        assert isinstance(e.reporter, RequireReporter)

    def test_debug_printer_from_config(self):
        e = Expect(config_obj=Config({"printer": "debug"}))

        assert isinstance(e.printer, DebugPrinter)

    def test_client_from_config(self):
        config = Config({"client": {"timeout": 5, "headers": {"User-Agent": "tests/1.0"}}})

        e = Expect(config_obj=config)

        assert isinstance(e.client, HttpClient)
        assert e.client is not default_http_client
        assert e.client.timeout == 5
        assert e.client.session.headers["User-Agent"] == "tests/1.0"

    def test_client_headers_from_config_are_sent(self):
        """Configured client headers should reach the request on the wire"""
        e = Expect(config_obj=Config({"client": {"headers": {"X-Token": "abc"}}}))
        adapter = CapturingAdapter()
        e.client.session.mount("http://", adapter)

        resp = e.get("http://example.org/x").with_header("Accept", "text/plain").expect()

        assert not resp.failed
        assert len(adapter.sent) == 1
        assert adapter.sent[0].headers["X-Token"] == "abc"
        assert adapter.sent[0].headers["Accept"] == "text/plain"

    def test_unknown_reporter_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Expect(config_obj=Config({"reporter": "email"}))

        assert exc_info.value.config_key == "reporter"

    def test_base_url_from_config_is_joined(self, mock_client, reporter):
        e = Expect(
            client=mock_client,
            printer=None,
            reporter=reporter,
            config_obj=Config({"base_url": "http://localhost:8080/api/"}),
        )

        e.delete("/users/%s", "bob").expect()

        prepared = sent_request(mock_client)
        assert prepared.method == "DELETE"
        assert prepared.url == "http://localhost:8080/api/users/bob"
