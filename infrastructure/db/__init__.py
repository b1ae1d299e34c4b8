"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into services
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseWorkoutHistoryRepository,
        SupabaseWorkoutLogRepository,
        SupabaseSplitRepository,
        SupabaseAccountRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    history_repo = SupabaseWorkoutHistoryRepository(client)
    log_repo = SupabaseWorkoutLogRepository(client)
"""

from infrastructure.db.workout_history_repository import SupabaseWorkoutHistoryRepository
from infrastructure.db.workout_log_repository import SupabaseWorkoutLogRepository
from infrastructure.db.split_repository import SupabaseSplitRepository
from infrastructure.db.account_repository import SupabaseAccountRepository

__all__ = [
    # Logged workouts (read side)
    "SupabaseWorkoutHistoryRepository",

    # Sessions and sets (write side)
    "SupabaseWorkoutLogRepository",

    # Training splits
    "SupabaseSplitRepository",

    # Account data
    "SupabaseAccountRepository",
]
