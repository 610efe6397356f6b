"""Abstract base class for calendar writers."""

from abc import ABC, abstractmethod

from ..models.event import CalendarEvent
from ..models.sync import SyncResult


class CalendarWriter(ABC):
    """Abstract base class for calendar writers."""

    @abstractmethod
    def create_event(self, calendar_id: str, event: CalendarEvent) -> SyncResult:
        """
        Create a new event.

        Args:
            calendar_id: Server id of the calendar folder
            event: CalendarEvent to create

        Returns:
            Parsed server response

        Raises:
            NetworkError: If the request fails
            ParseError: If the response is malformed
            CreationFailure: If the server reports a non-success status
        """
