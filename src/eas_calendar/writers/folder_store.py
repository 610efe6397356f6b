"""JSON persistence of folder lists."""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ..models.folder import Folder
from ..utils.exceptions import ParseError, PersistenceError

logger = logging.getLogger(__name__)


def save_folders(folders: list[Folder], path: Union[str, Path]) -> None:
    """
    Write ``folders`` to ``path`` as an indented JSON list, replacing the file.

    Raises:
        PersistenceError: If the file cannot be written
    """
    path = Path(path)
    data = [folder.model_dump(by_alias=True) for folder in folders]
    try:
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    except OSError as e:
        raise PersistenceError(f"Failed to write folders to {path}: {e}") from e
    logger.info(f"Saved {len(folders)} folder(s) to {path}")


def load_folders(path: Union[str, Path]) -> list[Folder]:
    """
    Read a folder list written by ``save_folders``.

    Raises:
        PersistenceError: If the file cannot be read
        ParseError: If the file is not a valid folder list
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PersistenceError(f"Failed to read folders from {path}: {e}") from e

    try:
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ParseError(f"{path} does not contain a folder list")
        return [Folder.model_validate(item) for item in data]
    except (json.JSONDecodeError, ValidationError) as e:
        raise ParseError(f"Malformed folder list in {path}: {e}") from e
