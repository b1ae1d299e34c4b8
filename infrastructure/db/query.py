"""
Query execution helpers shared by the Supabase repositories.
"""
from typing import Any, Dict, List, Optional
import logging

from application.exceptions import RepositoryError

logger = logging.getLogger(__name__)


def execute(query: Any, action: str) -> Any:
    """
    Execute a PostgREST query builder.

    Args:
        query: Supabase query builder (table(...).select(...)...)
        action: Human-readable description, e.g. "fetch session"

    Returns:
        The APIResponse

    Raises:
        RepositoryError: If the client raises for any reason
    """
    try:
        return query.execute()
    except Exception as e:
        logger.exception(f"Error trying to {action}: {e}")
        raise RepositoryError(f"Failed to {action}") from e


def rows(query: Any, action: str) -> List[Dict[str, Any]]:
    """Execute and return the row list ([] when nothing matched)."""
    return execute(query, action).data or []


def first_row(query: Any, action: str) -> Optional[Dict[str, Any]]:
    """Execute and return the first row, or None."""
    data = rows(query, action)
    return data[0] if data else None
