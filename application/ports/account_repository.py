"""
Account Repository Interface (Port).

Deletes everything the application stores for a user. The identity held by
the auth provider is managed there and is not touched.
"""
from typing import Dict, Protocol


class AccountRepository(Protocol):

    def delete_user_data(self, user_id: str) -> Dict[str, int]:
        """
        Delete all data owned by a user.

        Rows are removed children-first: sets, sessions, exercises,
        split_days, splits, then the users row.

        Args:
            user_id: User whose data should be removed

        Returns:
            Number of rows deleted per table
        """
        ...
