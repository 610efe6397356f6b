"""
Unit tests for the HTTP transport: URL parameters, auth, headers, failures.
"""

from unittest.mock import MagicMock

import pytest
import requests

from conftest import make_response, make_session
from eas_calendar.client import CONTENT_TYPE, EASClient
from eas_calendar.utils.exceptions import NetworkError


class TestPost:
    def test_request_shape(self, eas_config):
        session = make_session(b"<ok/>")
        client = EASClient(eas_config, session=session, timeout=5)

        body = client.post("FolderSync", b"<FolderSync/>")

        assert body == b"<ok/>"
        args, kwargs = session.post.call_args
        assert args[0] == eas_config.exchange_url
        assert kwargs["params"] == {
            "Cmd": "FolderSync",
            "User": "alice@example.com",
            "DeviceId": "DEV123",
            "DeviceType": "SmartPhone",
        }
        assert kwargs["headers"]["Content-Type"] == CONTENT_TYPE
        assert kwargs["auth"].username == "alice@example.com"
        assert kwargs["auth"].password == "s3cret"
        assert kwargs["data"] == b"<FolderSync/>"
        assert kwargs["timeout"] == 5

    def test_connection_error_raises_network_error(self, eas_config):
        session = MagicMock()
        session.post.side_effect = requests.ConnectionError("refused")
        client = EASClient(eas_config, session=session)

        with pytest.raises(NetworkError):
            client.post("Sync", b"")

    def test_http_error_raises_network_error(self, eas_config):
        resp = make_response(b"", status_code=401)
        resp.raise_for_status.side_effect = requests.HTTPError("401 Unauthorized")
        session = MagicMock()
        session.post.return_value = resp
        client = EASClient(eas_config, session=session)

        with pytest.raises(NetworkError):
            client.post("FolderSync", b"")

    def test_single_attempt_only(self, eas_config):
        session = MagicMock()
        session.post.side_effect = requests.Timeout("slow")
        client = EASClient(eas_config, session=session)

        with pytest.raises(NetworkError):
            client.post("FolderSync", b"")
        assert session.post.call_count == 1

    def test_close_closes_session(self, eas_config):
        session = MagicMock()
        EASClient(eas_config, session=session).close()
        session.close.assert_called_once()
