"""XML encoding of ActiveSync requests and decoding of server responses.

The functions here do no I/O. Requests are built as ElementTree documents and
serialized to bytes; responses are parsed from bytes into the models in
``eas_calendar.models``. Any structural problem with a response is reported as
a ``ParseError``.
"""

from typing import Optional
from xml.etree import ElementTree as ET

from ..models.event import CalendarEvent
from ..models.folder import Folder
from ..models.sync import FolderSyncResult, SyncResult
from ..utils.date_utils import format_eas_datetime
from ..utils.exceptions import ParseError

# Reset token: requests a full folder hierarchy
INITIAL_SYNC_KEY = "0"


def _to_bytes(root: ET.Element) -> bytes:
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def _parse_root(body: bytes, expected_tag: str) -> ET.Element:
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise ParseError(f"Malformed {expected_tag} response: {e}") from e
    if _local_name(root.tag) != expected_tag:
        raise ParseError(
            f"Unexpected root element <{root.tag}> in {expected_tag} response"
        )
    return root


def _text(element: ET.Element, name: str) -> str:
    # Matches the child in any namespace, or none
    return element.findtext(f"{{*}}{name}") or ""


def _status(root: ET.Element) -> int:
    raw = _text(root, "Status").strip()
    try:
        return int(raw)
    except ValueError as e:
        raise ParseError(
            f"Invalid Status {raw!r} in {_local_name(root.tag)} response"
        ) from e


def encode_folder_sync_request(sync_key: str = INITIAL_SYNC_KEY) -> bytes:
    """Build a FolderSync request body."""
    root = ET.Element("FolderSync")
    ET.SubElement(root, "SyncKey").text = sync_key
    return _to_bytes(root)


def decode_folder_sync_response(body: bytes) -> FolderSyncResult:
    """
    Parse a FolderSync response body.

    Args:
        body: Raw response bytes

    Returns:
        FolderSyncResult with status, sync key and folders in server order

    Raises:
        ParseError: If the body is not a well-formed FolderSync document
    """
    root = _parse_root(body, "FolderSync")
    folders = [
        Folder(
            display_name=_text(node, "DisplayName"),
            type=_text(node, "Type"),
            server_id=_text(node, "ServerId"),
        )
        for node in root.iterfind("{*}Folders/{*}Folder")
    ]
    return FolderSyncResult(
        status=_status(root),
        sync_key=_text(root, "SyncKey"),
        folders=folders,
    )


def encode_event_request(
    event: CalendarEvent, collection_id: Optional[str] = None
) -> bytes:
    """Build the request body that adds ``event`` to a calendar collection."""
    root = ET.Element("Calendar")
    if collection_id is not None:
        ET.SubElement(root, "CollectionId").text = collection_id
    ET.SubElement(root, "Subject").text = event.subject
    ET.SubElement(ET.SubElement(root, "Start"), "DT").text = format_eas_datetime(
        event.start
    )
    ET.SubElement(ET.SubElement(root, "End"), "DT").text = format_eas_datetime(
        event.end
    )
    ET.SubElement(ET.SubElement(root, "Body"), "Content").text = event.description
    ET.SubElement(
        ET.SubElement(root, "Location"), "DisplayName"
    ).text = event.location
    return _to_bytes(root)


def decode_sync_response(body: bytes) -> SyncResult:
    """Parse a Sync response body into its status and sync key."""
    root = _parse_root(body, "Sync")
    return SyncResult(status=_status(root), sync_key=_text(root, "SyncKey"))
