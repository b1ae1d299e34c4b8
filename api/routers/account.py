"""
Account management router.

Endpoints:
- DELETE /account: Delete all workout data belonging to the caller
"""
import logging

from fastapi import APIRouter, Depends

from api.deps import get_account_repo, get_current_user
from api.errors import to_http_exception
from application.exceptions import WorkoutHistoryError
from application.ports import AccountRepository

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/account",
    tags=["account"],
)


@router.delete("")
def delete_account(
    user_id: str = Depends(get_current_user),
    account_repo: AccountRepository = Depends(get_account_repo),
):
    """
    Delete the caller's data.

    This permanently deletes sets, sessions, exercises, split days, splits
    and the users row, in that order.

    Note: This does NOT delete the Supabase auth user - that must be done
    separately via the Supabase dashboard or admin API.
    """
    try:
        deleted = account_repo.delete_user_data(user_id)
    except WorkoutHistoryError as e:
        raise to_http_exception(e)
    return {"success": True, "deleted": deleted}
