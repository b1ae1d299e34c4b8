"""
API package for the Split Tracker API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: Application error to HTTP status mapping
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_workout_history_repo,
    get_split_repo,
    get_workout_log_repo,
    get_account_repo,
    get_workout_history_service,
    get_split_service,
    get_workout_log_service,
    get_current_user,
    get_optional_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_workout_history_repo",
    "get_split_repo",
    "get_workout_log_repo",
    "get_account_repo",
    # Services
    "get_workout_history_service",
    "get_split_service",
    "get_workout_log_service",
    # Authentication
    "get_current_user",
    "get_optional_user",
]
