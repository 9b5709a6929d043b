"""Key-value mirror of Printify API responses."""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.base import utcnow
from app.db.models import PrintifyCache

logger = logging.getLogger(__name__)


class PrintifyCacheService:
    """Stores the latest Printify payload per (type, external ID).

    Entries are overwritten on write and never expire.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def _find(self, cache_type: str, external_id: str) -> PrintifyCache | None:
        return self.db.scalars(
            select(PrintifyCache).where(
                PrintifyCache.type == cache_type,
                PrintifyCache.external_id == external_id,
            )
        ).first()

    def get(self, cache_type: str, external_id: str) -> PrintifyCache | None:
        """Get cached entry."""
        return self._find(cache_type, external_id)

    def put(self, cache_type: str, external_id: str, data: Any) -> PrintifyCache:
        """Insert or overwrite an entry."""
        entry = self._find(cache_type, external_id)
        if entry is None:
            entry = PrintifyCache(type=cache_type, external_id=external_id)
            self.db.add(entry)
        entry.data = data
        entry.last_updated = utcnow()

        self.db.commit()
        self.db.refresh(entry)
        logger.debug(f"Cached printify {cache_type} {external_id}")
        return entry

    def delete(self, cache_type: str, external_id: str) -> bool:
        """Remove an entry."""
        entry = self._find(cache_type, external_id)
        if entry is None:
            return False
        self.db.delete(entry)
        self.db.commit()
        return True
