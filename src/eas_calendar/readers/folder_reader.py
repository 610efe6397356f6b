"""ActiveSync folder reader."""

import logging

from ..client import EASClient
from ..models.sync import STATUS_SUCCESS, FolderSyncResult
from ..protocol.codec import (
    INITIAL_SYNC_KEY,
    decode_folder_sync_response,
    encode_folder_sync_request,
)
from .base import FolderReader

logger = logging.getLogger(__name__)


class EASFolderReader(FolderReader):
    """Read the folder hierarchy with a single full FolderSync."""

    def __init__(self, client: EASClient):
        self.client = client

    def list_folders(self) -> FolderSyncResult:
        body = encode_folder_sync_request(INITIAL_SYNC_KEY)
        result = decode_folder_sync_response(self.client.post("FolderSync", body))

        if result.status != STATUS_SUCCESS:
            logger.warning(f"FolderSync returned status {result.status}")
        logger.info(
            f"FolderSync returned {len(result.folders)} folders (sync key {result.sync_key or '<none>'})"
        )
        return result
