"""
In-memory record store.

Users are kept in a plain dictionary keyed by identifier.  There is no
persistence and no eviction: records live for the lifetime of the
process.  Every method takes the store lock; the lock is re-entrant
and exposed as ``lock`` so that callers can make a check followed by a
``put`` atomic.
"""

import threading
from typing import Dict, List, Optional

from ..schemas.user import UserRead


class RecordStore:
    """Thread-safe mapping from user id to ``UserRead``."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._records: Dict[int, UserRead] = {}

    def put(self, user_id: int, record: UserRead) -> None:
        """Insert ``record`` unconditionally.  Callers check for duplicates."""
        with self.lock:
            self._records[user_id] = record

    def get(self, user_id: int) -> Optional[UserRead]:
        with self.lock:
            return self._records.get(user_id)

    def contains(self, user_id: int) -> bool:
        with self.lock:
            return user_id in self._records

    def list(self) -> List[UserRead]:
        """Return a snapshot of all records.  No ordering is promised."""
        with self.lock:
            return list(self._records.values())

    def __len__(self) -> int:
        with self.lock:
            return len(self._records)
