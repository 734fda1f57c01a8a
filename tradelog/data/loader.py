"""Load day entries from a JSON export of the journal document store.

Three export shapes are accepted:

* a list of day documents,
* an object with a ``dayEntries`` list,
* an object keyed by document id.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from tradelog.models import DayEntry

logger = logging.getLogger(__name__)

ENTRIES_COLLECTION = "dayEntries"

_entries_adapter = TypeAdapter(list[DayEntry])


class EntryLoadError(Exception):
    """Raised when day entries cannot be read or validated."""

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")


def _extract_documents(data: Any) -> list:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        if ENTRIES_COLLECTION in data:
            return _extract_documents(data[ENTRIES_COLLECTION])
        documents = []
        for doc_id, doc in data.items():
            if isinstance(doc, dict):
                # Firestore-style exports may omit the id inside the document
                doc = {"id": doc_id, **doc}
            documents.append(doc)
        return documents
    raise ValueError(f"expected a list or object of day entries, got {type(data).__name__}")


def load_entries_from_documents(data: Any, source: str = "<documents>") -> list[DayEntry]:
    """Validate parsed documents into day entries.

    Args:
        data: Parsed JSON in one of the accepted export shapes.
        source: Name used in error messages.

    Returns:
        Day entries, one per unique id. When an id repeats, the later
        document replaces the earlier one.

    Raises:
        EntryLoadError: If the data is not a recognised shape or fails validation.
    """
    try:
        entries = _entries_adapter.validate_python(_extract_documents(data))
    except (ValueError, ValidationError) as e:
        raise EntryLoadError(source, str(e)) from e

    by_id: dict[str, DayEntry] = {}
    for entry in entries:
        if entry.id in by_id:
            logger.warning("Duplicate day entry %s in %s; keeping the later one", entry.id, source)
        by_id[entry.id] = entry

    logger.info("Loaded %d day entries from %s", len(by_id), source)
    return list(by_id.values())


def load_entries(path: Path) -> list[DayEntry]:
    """Load day entries from a JSON file.

    Raises:
        EntryLoadError: If the file is missing, is not JSON, or fails validation.
    """
    path = Path(path).expanduser()
    if not path.exists():
        raise EntryLoadError(str(path), "file not found")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise EntryLoadError(str(path), str(e)) from e

    return load_entries_from_documents(data, source=str(path))
