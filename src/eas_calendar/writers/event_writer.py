"""ActiveSync calendar event writer."""

import logging
from datetime import datetime, timedelta
from typing import Optional

import pytz

from ..client import EASClient
from ..models.event import CalendarEvent
from ..models.sync import SyncResult
from ..protocol.codec import decode_sync_response, encode_event_request
from ..utils.exceptions import CreationFailure
from .base import CalendarWriter

logger = logging.getLogger(__name__)


def build_default_event(now: Optional[datetime] = None) -> CalendarEvent:
    """Build the fixed test event: three hours starting at ``now`` (UTC)."""
    start = now or datetime.now(pytz.utc)
    return CalendarEvent(
        subject="test",
        start=start,
        end=start + timedelta(hours=3),
        description="djhfbchjbchb",
        location="home",
    )


class EASCalendarWriter(CalendarWriter):
    """Create calendar items with the Sync command."""

    def __init__(self, client: EASClient):
        self.client = client

    def create_event(self, calendar_id: str, event: CalendarEvent) -> SyncResult:
        body = encode_event_request(event, collection_id=calendar_id)
        result = decode_sync_response(self.client.post("Sync", body))

        if not result.succeeded:
            raise CreationFailure(
                f"Server rejected event '{event.subject}' with status {result.status}",
                status=result.status,
            )

        logger.info(f"Created event '{event.subject}' in calendar {calendar_id}")
        return result
