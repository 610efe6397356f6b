"""Calendar event data model."""

from datetime import datetime

from pydantic import BaseModel, model_validator


class CalendarEvent(BaseModel):
    """A calendar item to be created on the server."""

    subject: str
    start: datetime
    end: datetime
    description: str = ""
    location: str = ""

    @model_validator(mode="after")
    def _check_range(self) -> "CalendarEvent":
        if self.end < self.start:
            raise ValueError("event end precedes its start")
        return self
