"""In-memory command library holding the records served over the API."""

from typing import Dict, Iterable, List, Optional, Tuple

import structlog

from ..models.record import Record

logger = structlog.get_logger(__name__)


class RecordLibrary:
    """Ordered, in-memory collection of records keyed by id.

    Searches run against ``snapshot()``, an immutable copy, so later
    changes to the library never affect a search that is under way.
    """

    def __init__(self) -> None:
        """Initialize an empty library."""
        self._records: Dict[str, Record] = {}

    def load(self, records: Iterable[Record]) -> int:
        """
        Replace the library contents.

        Args:
            records: Records to load; a later duplicate id replaces an earlier one

        Returns:
            Number of records now loaded
        """
        self._records = {}
        for record in records:
            self._records[record.id] = record

        logger.info("Records loaded", total_records=len(self._records))
        return len(self._records)

    def add(self, record: Record) -> bool:
        """
        Add a record, replacing any record with the same id in place.

        Args:
            record: Record to add

        Returns:
            True if the record was new, False if it replaced an existing one
        """
        is_new = record.id not in self._records
        self._records[record.id] = record

        logger.info("Record added" if is_new else "Record replaced", record_id=record.id)
        return is_new

    def remove(self, record_id: str) -> bool:
        """
        Remove a record.

        Args:
            record_id: Id of the record to remove

        Returns:
            True if removed, False if no such record
        """
        if record_id not in self._records:
            return False

        del self._records[record_id]
        logger.info("Record removed", record_id=record_id)
        return True

    def get(self, record_id: str) -> Optional[Record]:
        """Get a record by id."""
        return self._records.get(record_id)

    def snapshot(self) -> Tuple[Record, ...]:
        """Get an immutable copy of the records in insertion order."""
        return tuple(self._records.values())

    def all_records(self) -> List[Record]:
        """Get the records in insertion order."""
        return list(self._records.values())

    def clear(self) -> None:
        """Remove all records."""
        self._records = {}

    def __len__(self) -> int:
        return len(self._records)
