"""
Infrastructure Layer for the Split Tracker API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseWorkoutHistoryRepository,
    SupabaseWorkoutLogRepository,
    SupabaseSplitRepository,
    SupabaseAccountRepository,
)

__all__ = [
    "SupabaseWorkoutHistoryRepository",
    "SupabaseWorkoutLogRepository",
    "SupabaseSplitRepository",
    "SupabaseAccountRepository",
]
