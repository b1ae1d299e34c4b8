"""
Translation of application errors into HTTP errors for write endpoints.

Read endpoints return the {success, error} envelope instead; see
domain.models.ServiceResult.
"""
import logging

from fastapi import HTTPException

from application.exceptions import (
    RepositoryError,
    SplitValidationError,
    WorkoutAccessDeniedError,
    WorkoutHistoryError,
    WorkoutNotFoundError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = (
    (SplitValidationError, 400),
    (WorkoutAccessDeniedError, 403),
    (WorkoutNotFoundError, 404),
    (RepositoryError, 500),
)


def to_http_exception(error: WorkoutHistoryError) -> HTTPException:
    """
    Map an application error to an HTTPException.

    Repository failures keep their detail out of the response; everything
    else surfaces its message.
    """
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            break
    else:
        status_code = 500

    if status_code >= 500:
        logger.error(f"Request failed: {error}")
        return HTTPException(status_code=status_code, detail="Database operation failed")

    logger.warning(f"Request rejected ({status_code}): {error}")
    return HTTPException(status_code=status_code, detail=str(error))
