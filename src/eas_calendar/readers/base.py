"""Abstract base class for folder readers."""

from abc import ABC, abstractmethod

from ..models.folder import Folder
from ..models.sync import FolderSyncResult


def filter_folders(folders: list[Folder], folder_type: str) -> list[Folder]:
    """
    Select folders whose type marker equals ``folder_type``.

    Args:
        folders: Folders in server order
        folder_type: Type marker to match exactly

    Returns:
        Matching folders in their original order (empty if none match)
    """
    return [folder for folder in folders if folder.type == folder_type]


class FolderReader(ABC):
    """Abstract base class for folder readers."""

    @abstractmethod
    def list_folders(self) -> FolderSyncResult:
        """
        Enumerate all folders of the mailbox.

        Returns:
            FolderSyncResult with the server's folder list

        Raises:
            NetworkError: If the request fails
            ParseError: If the response is malformed
        """

    def list_calendars(self, folder_type: str) -> list[Folder]:
        """List folders matching ``folder_type``."""
        return filter_folders(self.list_folders().folders, folder_type)
