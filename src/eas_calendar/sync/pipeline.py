"""Folder enumeration and event creation pipeline."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from ..client import EASClient
from ..config import EASConfig
from ..models.event import CalendarEvent
from ..models.folder import Folder
from ..readers.base import FolderReader
from ..readers.folder_reader import EASFolderReader
from ..writers.base import CalendarWriter
from ..writers.event_writer import EASCalendarWriter, build_default_event
from ..writers.folder_store import save_folders

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Result of a pipeline run."""

    output_path: Path
    calendars: list[Folder] = field(default_factory=list)
    event_created: bool = False
    calendar_id: Optional[str] = None


class CalendarPipeline:
    """List folders, store the calendars, and create one event."""

    def __init__(self, reader: FolderReader, writer: CalendarWriter):
        """
        Initialize the pipeline.

        Args:
            reader: Folder reader used to enumerate the mailbox
            writer: Calendar writer used to create the event
        """
        self.reader = reader
        self.writer = writer

    def run(
        self,
        folder_type: str,
        output_path: Union[str, Path],
        event: Optional[CalendarEvent] = None,
    ) -> PipelineResult:
        """
        Run every step in order; the first failure propagates to the caller.

        Args:
            folder_type: Type marker identifying calendar folders
            output_path: Where to write the calendar folder list
            event: Event to create (the default test event if None)

        Returns:
            PipelineResult describing what was done
        """
        result = PipelineResult(output_path=Path(output_path))

        result.calendars = self.reader.list_calendars(folder_type)
        logger.info(f"{len(result.calendars)} folder(s) have type {folder_type!r}")

        save_folders(result.calendars, result.output_path)

        event = event or build_default_event()

        if not result.calendars:
            logger.info("No matching calendar found, skipping event creation")
            return result

        target = result.calendars[0]
        logger.info(f"Creating event '{event.subject}' in '{target.display_name}'")
        self.writer.create_event(target.server_id, event)
        result.event_created = True
        result.calendar_id = target.server_id
        return result


def run_pipeline(
    config: EASConfig,
    client: EASClient,
    output_path: Union[str, Path],
    event: Optional[CalendarEvent] = None,
) -> PipelineResult:
    """Run the pipeline against an ActiveSync server."""
    pipeline = CalendarPipeline(EASFolderReader(client), EASCalendarWriter(client))
    return pipeline.run(config.calendar_folder_type, output_path, event)
