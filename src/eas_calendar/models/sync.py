"""Parsed protocol responses."""

from pydantic import BaseModel, Field

from .folder import Folder

# Status code the server returns for a successful command
STATUS_SUCCESS = 1


class FolderSyncResult(BaseModel):
    """Parsed FolderSync response."""

    status: int
    sync_key: str = ""
    folders: list[Folder] = Field(default_factory=list)


class SyncResult(BaseModel):
    """Parsed Sync response."""

    status: int
    sync_key: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status == STATUS_SUCCESS
