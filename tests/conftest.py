"""
Shared pytest fixtures and canned ActiveSync responses.
"""

from unittest.mock import MagicMock

import pytest

from eas_calendar.client import EASClient
from eas_calendar.config import EASConfig

CALENDAR_TYPE = "8"


def folder_sync_xml(folders, status: int = 1, sync_key: str = "1") -> bytes:
    """Return a FolderSync response body listing ``(name, type, server_id)`` tuples."""
    entries = "".join(
        f"<Folder><DisplayName>{name}</DisplayName><Type>{ftype}</Type>"
        f"<ServerId>{server_id}</ServerId></Folder>"
        for name, ftype, server_id in folders
    )
    return (
        f"<FolderSync><Status>{status}</Status><SyncKey>{sync_key}</SyncKey>"
        f"<Folders>{entries}</Folders></FolderSync>"
    ).encode("utf-8")


def sync_xml(status: int = 1, sync_key: str = "2") -> bytes:
    """Return a Sync response body with the given status."""
    return f"<Sync><Status>{status}</Status><SyncKey>{sync_key}</SyncKey></Sync>".encode("utf-8")


def make_response(body: bytes, status_code: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.content = body
    resp.status_code = status_code
    resp.raise_for_status.return_value = None
    return resp


def make_session(*bodies: bytes) -> MagicMock:
    """Return a fake requests.Session whose post() yields ``bodies`` in order."""
    session = MagicMock()
    session.post.side_effect = [make_response(body) for body in bodies]
    return session


MIXED_FOLDERS = [
    ("Inbox", "2", "f-inbox"),
    ("Calendar", CALENDAR_TYPE, "f-cal"),
    ("Team Calendar", CALENDAR_TYPE, "f-team"),
]


@pytest.fixture
def eas_config():
    return EASConfig(
        exchange_url="https://mail.example.com/Microsoft-Server-ActiveSync",
        username="alice@example.com",
        password="s3cret",
        device_id="DEV123",
        calendar_folder_type=CALENDAR_TYPE,
    )


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "exchange_url: https://mail.example.com/Microsoft-Server-ActiveSync\n"
        "username: alice@example.com\n"
        "password: s3cret\n"
        "device_id: DEV123\n"
        'calendar_folder_type: "8"\n'
    )
    return path


@pytest.fixture
def client_factory(eas_config):
    def factory(*bodies: bytes) -> EASClient:
        return EASClient(eas_config, session=make_session(*bodies))

    return factory
