"""
In-memory user store shared by all request handlers
"""

import logging
import threading
from typing import Dict, List, Optional

from users_api.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """
    Lock-protected mapping of user ID to User plus the ID counter

    A single lock guards `_records` and `_next_id` together and is held for
    the full body of every operation, reads included. Nothing inside the
    critical section does I/O. Callers only ever receive copies of stored
    records, so a returned User can be mutated freely without touching
    store state.

    Absence is never an exception: `get` and `update` return None and
    `delete` returns False when the ID is unknown.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._records: Dict[int, User] = {}
        self._next_id = 1
        logger.info("UserStore initialized")

    def list_users(self) -> List[User]:
        """
        Snapshot of all users

        Returns:
            Copies of every stored user in ascending ID order
        """
        with self._lock:
            # IDs are issued in increasing order and updates keep the key,
            # so dict insertion order is ID order
            return [user.model_copy() for user in self._records.values()]

    def create(self, name: str, email: str) -> User:
        """
        Store a new user under the next free ID

        Args:
            name: User name, stored as given
            email: User email, stored as given

        Returns:
            Copy of the stored user, including its assigned ID
        """
        with self._lock:
            user = User(id=self._next_id, name=name, email=email)
            self._next_id += 1
            self._records[user.id] = user
            return user.model_copy()

    def get(self, user_id: int) -> Optional[User]:
        """Return a copy of the user, or None if absent"""
        with self._lock:
            user = self._records.get(user_id)
            return user.model_copy() if user is not None else None

    def update(self, user_id: int, name: str, email: str) -> Optional[User]:
        """
        Replace name and email of an existing user, keeping its ID

        Returns:
            Copy of the new value, or None if absent (store unchanged)
        """
        with self._lock:
            if user_id not in self._records:
                return None
            user = User(id=user_id, name=name, email=email)
            self._records[user_id] = user
            return user.model_copy()

    def delete(self, user_id: int) -> bool:
        """Remove a user; returns False if it was not present"""
        with self._lock:
            return self._records.pop(user_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._records)
