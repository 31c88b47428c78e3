"""
Service layer for the in‑memory dataset.

The dataset is created once at import time and lives for the lifetime
of the process.  It is a tuple of frozen ``Record`` instances, so it
can be shared between concurrent requests without any locking.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from simple_server_api.app.schemas.record import Record

RECORDS: Tuple[Record, ...] = (
    Record(name="ben"),
    Record(name="zo"),
    Record(name="carmen"),
)


class DataService:
    """Service class for reading the static dataset."""

    @classmethod
    async def list_records(cls, name_filter: Optional[str] = None) -> List[Record]:
        """Return the records matching ``name_filter``.

        Without a filter (``None`` or an empty string) the full dataset
        is returned in insertion order.  Otherwise only records whose
        ``name`` equals the filter exactly are returned; comparison is
        case sensitive and an unmatched filter yields an empty list.
        """
        logger = logging.getLogger(__name__)
        if not name_filter:
            return list(RECORDS)
        matches = [record for record in RECORDS if record.name == name_filter]
        logger.debug("Filter %r matched %d record(s)", name_filter, len(matches))
        return matches
