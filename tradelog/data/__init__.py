"""Input assembly for day entries."""

from tradelog.data.loader import EntryLoadError, load_entries, load_entries_from_documents

__all__ = ["EntryLoadError", "load_entries", "load_entries_from_documents"]
