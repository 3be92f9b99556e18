"""Tests for the requests-backed transport."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from common.http_client import RequestsTransport
from constants import Constants


@patch("common.http_client.requests.request")
def test_send_returns_status_code(mock_request):
    """The transport reports only the status code."""
    mock_request.return_value = MagicMock(status_code=204)

    status = RequestsTransport().send("DELETE", "https://nuget.org/api/v2/Package/Foo/1.0.0?apiKey=K")

    assert status == 204


@patch("common.http_client.requests.request")
def test_send_uses_empty_body_and_zero_length(mock_request):
    """Requests carry no body and an explicit Content-Length of 0."""
    mock_request.return_value = MagicMock(status_code=200)

    RequestsTransport(timeout=5).send("POST", "https://nuget.org/x")

    args, kwargs = mock_request.call_args
    assert args == ("POST", "https://nuget.org/x")
    assert kwargs["data"] == b""
    assert kwargs["headers"]["Content-Length"] == "0"
    assert kwargs["headers"]["User-Agent"] == Constants.USER_AGENT
    assert kwargs["timeout"] == 5


@patch("common.http_client.requests.request")
def test_default_timeout(mock_request):
    mock_request.return_value = MagicMock(status_code=200)

    RequestsTransport().send("POST", "https://nuget.org/x")

    assert mock_request.call_args[1]["timeout"] == Constants.REQUEST_TIMEOUT


def test_uses_session_when_given():
    """A supplied session is used instead of the module-level API."""
    session = MagicMock()
    session.request.return_value = MagicMock(status_code=200)

    RequestsTransport(session=session).send("DELETE", "https://nuget.org/x")

    session.request.assert_called_once()


@patch("common.http_client.requests.request")
def test_connection_error_propagates(mock_request):
    """Transport failures are raised, not translated."""
    mock_request.side_effect = requests.ConnectionError("dns failure")

    with pytest.raises(requests.ConnectionError):
        RequestsTransport().send("DELETE", "https://nuget.invalid/x")


@patch("common.http_client.requests.request")
def test_debug_trace_redacts_api_key(mock_request, caplog):
    mock_request.return_value = MagicMock(status_code=200)

    with caplog.at_level("DEBUG", logger="common.http_client"):
        RequestsTransport().send("DELETE", "https://nuget.org/x?apiKey=SECRET")

    records = [r for r in caplog.records if r.name == "common.http_client"]
    assert [r.getMessage() for r in records] == ["HTTP request", "HTTP response"]
    assert records[0].target == "https://nuget.org/x?apiKey=***"
    assert records[1].status_code == 200
