"""
Tests for repository protocol definitions.

These tests verify that:
1. Protocol definitions are valid and importable
2. Protocols define the expected methods
3. Supabase and fake implementations provide every protocol method
"""
import inspect

import pytest

# All tests in this module are pure logic tests (no TestClient) - mark as unit
pytestmark = pytest.mark.unit


def _protocol_methods(protocol):
    return sorted(
        name for name, member in vars(protocol).items()
        if inspect.isfunction(member) and not name.startswith("_")
    )


class TestProtocolImports:
    """Test that all protocols can be imported."""

    def test_ports_package_exports(self):
        from application import ports

        assert sorted(ports.__all__) == [
            "AccountRepository",
            "SplitRepository",
            "WorkoutHistoryRepository",
            "WorkoutLogRepository",
        ]


class TestProtocolMethods:
    """Test that protocols define the methods the services call."""

    def test_workout_history_repository(self):
        from application.ports import WorkoutHistoryRepository

        assert _protocol_methods(WorkoutHistoryRepository) == [
            "count_sessions",
            "find_most_recent_prior_session",
            "get_session",
            "get_split",
            "get_split_day",
            "list_recent_sessions",
            "list_session_sets",
            "list_sessions_in_range",
            "list_split_day_exercises",
        ]

    def test_split_repository(self):
        from application.ports import SplitRepository

        assert _protocol_methods(SplitRepository) == [
            "create_exercise",
            "create_split",
            "create_split_day",
            "get_exercise",
            "get_split_day",
            "list_exercises",
            "list_split_days",
            "list_splits",
            "update_exercise",
        ]

    def test_workout_log_repository(self):
        from application.ports import WorkoutLogRepository

        assert _protocol_methods(WorkoutLogRepository) == [
            "create_session",
            "get_most_recent_sets",
            "get_session",
            "insert_sets",
            "replace_exercise_sets",
        ]

    def test_account_repository(self):
        from application.ports import AccountRepository

        assert _protocol_methods(AccountRepository) == ["delete_user_data"]


class TestImplementationsSatisfyProtocols:
    """Every implementation must provide every protocol method."""

    @pytest.mark.parametrize("protocol_name,implementations", [
        ("WorkoutHistoryRepository", ["SupabaseWorkoutHistoryRepository", "FakeWorkoutHistoryRepository"]),
        ("SplitRepository", ["SupabaseSplitRepository", "FakeSplitRepository"]),
        ("WorkoutLogRepository", ["SupabaseWorkoutLogRepository", "FakeWorkoutLogRepository"]),
        ("AccountRepository", ["SupabaseAccountRepository", "FakeAccountRepository"]),
    ])
    def test_methods_present(self, protocol_name, implementations):
        from application import ports
        import infrastructure
        from tests import fakes

        protocol = getattr(ports, protocol_name)
        for impl_name in implementations:
            impl = getattr(infrastructure, impl_name, None) or getattr(fakes, impl_name)
            for method in _protocol_methods(protocol):
                assert callable(getattr(impl, method, None)), f"{impl_name} is missing {method}"
