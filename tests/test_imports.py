"""Verify all modules can be imported without errors."""
import pytest

# All tests in this module are pure import checks - mark as unit tests
pytestmark = pytest.mark.unit


def test_backend_imports():
    """Import backend entry points to catch bad import paths."""
    import backend.auth
    import backend.main
    import backend.settings


def test_core_logic_imports():
    """Import core logic modules."""
    import backend.core.muscle_groups
    import backend.core.progress_calculator
    import backend.core.snapshot_loader
    import backend.core.split_service
    import backend.core.workout_history_service
    import backend.core.workout_log_service


def test_layer_imports():
    """Import domain, application and infrastructure packages."""
    import application.exceptions
    import application.ports
    import domain.models
    import infrastructure.db


def test_router_imports():
    """Import API routers."""
    import api.errors
    import api.routers.account
    import api.routers.health
    import api.routers.splits
    import api.routers.workout_history
    import api.routers.workouts
