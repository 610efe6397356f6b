"""Folder metadata model."""

from pydantic import BaseModel, Field


class Folder(BaseModel):
    """A mailbox folder as reported by FolderSync."""

    display_name: str = Field(alias="DisplayName")
    type: str = Field(alias="Type")  # EAS folder type marker, e.g. "8" for calendars
    server_id: str = Field(alias="FolderID")

    model_config = {"frozen": True, "populate_by_name": True}
