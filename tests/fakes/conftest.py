"""
Test Fixtures and Helpers for Fake Repositories.

This module provides pytest fixtures and helper functions for easily overriding
FastAPI dependencies with fake repository implementations.

Usage:
    # In your test file
    from tests.fakes.conftest import override_dependency, reset_overrides

    def test_something():
        reset_overrides()
        override_dependency(get_workout_history_repo, FakeWorkoutHistoryRepository())

        # Test code here...

        reset_overrides()
"""

from typing import Any, Callable, Dict

import pytest

from api import deps
from backend.main import app

RepoGetter = Callable[..., Any]


# =============================================================================
# Reset and Override Functions
# =============================================================================


def reset_overrides() -> None:
    """
    Reset all FastAPI dependency overrides.

    Call this in test setup/teardown to ensure clean state.
    """
    app.dependency_overrides.clear()


def override_dependency(
    getter: RepoGetter,
    implementation: Any,
) -> None:
    """
    Override a FastAPI dependency with a fake implementation.

    Args:
        getter: The dependency getter function (e.g., get_split_repo)
        implementation: The fake implementation instance or factory
    """
    if callable(implementation) and not isinstance(implementation, type):
        # A factory function
        app.dependency_overrides[getter] = implementation
    else:
        app.dependency_overrides[getter] = lambda: implementation


# =============================================================================
# pytest Fixtures
# =============================================================================


@pytest.fixture
def override_deps() -> Callable[[RepoGetter, Any], Any]:
    """
    Fixture that provides a dependency override helper.

    Automatically resets overrides before each test and cleans up after.
    """
    reset_overrides()

    def _override(getter: RepoGetter, implementation: Any) -> Any:
        override_dependency(getter, implementation)
        return implementation

    yield _override

    reset_overrides()


@pytest.fixture
def app_with_fake_repos() -> Dict[str, Any]:
    """
    Fixture that overrides every repository dependency and authentication.

    Requests are authenticated as "user-1". Returns the dict from
    tests.fakes.create_repos for seeding.
    """
    from tests.fakes import create_repos

    repos = create_repos()
    reset_overrides()

    override_dependency(deps.get_workout_history_repo, repos["history_repo"])
    override_dependency(deps.get_split_repo, repos["split_repo"])
    override_dependency(deps.get_workout_log_repo, repos["log_repo"])
    override_dependency(deps.get_account_repo, repos["account_repo"])
    app.dependency_overrides[deps.get_current_user] = lambda: "user-1"

    yield repos

    reset_overrides()


__all__ = [
    "reset_overrides",
    "override_dependency",
    "override_deps",
    "app_with_fake_repos",
]
