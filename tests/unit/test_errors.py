"""
Unit tests for api/errors.py
"""
import pytest

from api.errors import to_http_exception
from application.exceptions import (
    RepositoryError,
    SplitValidationError,
    WorkoutAccessDeniedError,
    WorkoutHistoryError,
    WorkoutNotFoundError,
)


@pytest.mark.unit
class TestToHttpException:

    @pytest.mark.parametrize("error,status_code", [
        (SplitValidationError("Split name is required"), 400),
        (WorkoutAccessDeniedError("You do not have access to this workout"), 403),
        (WorkoutNotFoundError("Workout not found: abc"), 404),
    ])
    def test_client_errors_keep_message(self, error, status_code):
        exc = to_http_exception(error)

        assert exc.status_code == status_code
        assert exc.detail == str(error)

    def test_repository_error_hides_detail(self):
        exc = to_http_exception(RepositoryError("Failed to insert sets"))

        assert exc.status_code == 500
        assert exc.detail == "Database operation failed"

    def test_unknown_error_is_500(self):
        exc = to_http_exception(WorkoutHistoryError("something else"))

        assert exc.status_code == 500
