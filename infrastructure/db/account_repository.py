"""
Supabase Account Repository Implementation.

Deletes a user's rows children-first so foreign keys never block a delete.
"""
from typing import Dict, List
import logging

from supabase import Client

from infrastructure.db.query import rows

logger = logging.getLogger(__name__)


class SupabaseAccountRepository:
    """
    Supabase implementation of AccountRepository.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def _ids(self, table: str, column: str, values: List[str]) -> List[str]:
        if not values:
            return []
        found = rows(
            self._client.table(table).select("id").in_(column, values),
            f"fetch {table} ids",
        )
        return [r["id"] for r in found]

    def _delete_in(self, table: str, column: str, values: List[str]) -> int:
        if not values:
            return 0
        deleted = rows(
            self._client.table(table).delete().in_(column, values),
            f"delete {table}",
        )
        return len(deleted)

    def delete_user_data(self, user_id: str) -> Dict[str, int]:
        session_ids = self._ids("sessions", "user_id", [user_id])
        split_ids = self._ids("splits", "user_id", [user_id])
        split_day_ids = self._ids("split_days", "split_id", split_ids)

        counts = {
            "sets": self._delete_in("sets", "session_id", session_ids),
            "sessions": self._delete_in("sessions", "id", session_ids),
            "exercises": self._delete_in("exercises", "split_day_id", split_day_ids),
            "split_days": self._delete_in("split_days", "id", split_day_ids),
            "splits": self._delete_in("splits", "id", split_ids),
            "users": self._delete_in("users", "id", [user_id]),
        }
        logger.info(f"Deleted account data for user {user_id}: {counts}")
        return counts
