"""
Pytest configuration and fixtures shared by the request builder tests
"""

from unittest.mock import Mock

import pytest

from httpexpect.chain import LoggerReporter
from httpexpect.config import Config
from httpexpect.expect import Expect


@pytest.fixture
def mock_response():
    """Raw response returned by the mock transport"""
    response = Mock()
    response.status_code = 200
    response.reason = "OK"
    response.headers = {"Content-Type": "text/plain"}
    response.content = b"hello"
    return response


@pytest.fixture
def mock_client(mock_response):
    """Transport double: do() returns mock_response"""
    client = Mock()
    client.do.return_value = mock_response
    return client


@pytest.fixture
def reporter():
    """Non-fatal reporter that collects failure messages"""
    return LoggerReporter()


@pytest.fixture
def expect(mock_client, reporter):
    """Expect without base URL or printer, wired to the mock transport"""
    return Expect(
        base_url="",
        client=mock_client,
        printer=None,
        reporter=reporter,
        config_obj=Config({}),
    )
