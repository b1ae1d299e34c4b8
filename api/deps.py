"""
FastAPI Dependency Providers for the Split Tracker API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request
- Service providers are built from repository providers
- Auth providers wrap backend.auth

Usage in routers:
    from api.deps import get_workout_history_service, get_current_user
    from backend.core.workout_history_service import WorkoutHistoryService

    @router.get("/workout-history/recent")
    def recent(
        user_id: str = Depends(get_current_user),
        service: WorkoutHistoryService = Depends(get_workout_history_service),
    ):
        return service.get_recent_workouts(user_id).to_response()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_history_repo] = lambda: FakeWorkoutHistoryRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    AccountRepository,
    SplitRepository,
    WorkoutHistoryRepository,
    WorkoutLogRepository,
)

# Concrete implementations
from infrastructure import (
    SupabaseAccountRepository,
    SupabaseSplitRepository,
    SupabaseWorkoutHistoryRepository,
    SupabaseWorkoutLogRepository,
)

from backend.core.split_service import SplitService
from backend.core.workout_history_service import WorkoutHistoryService
from backend.core.workout_log_service import WorkoutLogService
from backend.settings import Settings, get_settings as _get_settings

# Auth from existing module (wrap to maintain single source of truth)
from backend.auth import (
    get_current_user as _get_current_user,
    get_optional_user as _get_optional_user,
)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_workout_history_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutHistoryRepository:
    """
    Get WorkoutHistoryRepository implementation.

    Returns a SupabaseWorkoutHistoryRepository instance with injected client.
    The return type is the Protocol to enable easy faking.

    Args:
        client: Supabase client (injected)

    Returns:
        WorkoutHistoryRepository: Read access to logged workouts
    """
    return SupabaseWorkoutHistoryRepository(client)


def get_split_repo(
    client: Client = Depends(get_supabase_client_required),
) -> SplitRepository:
    """
    Get SplitRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        SplitRepository: Repository for splits, split days and exercises
    """
    return SupabaseSplitRepository(client)


def get_workout_log_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutLogRepository:
    """
    Get WorkoutLogRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        WorkoutLogRepository: Repository for sessions and sets
    """
    return SupabaseWorkoutLogRepository(client)


def get_account_repo(
    client: Client = Depends(get_supabase_client_required),
) -> AccountRepository:
    """Get AccountRepository implementation."""
    return SupabaseAccountRepository(client)


# =============================================================================
# Service Providers
# =============================================================================


def get_workout_history_service(
    history_repo: WorkoutHistoryRepository = Depends(get_workout_history_repo),
) -> WorkoutHistoryService:
    """
    Get WorkoutHistoryService with injected repository.

    Args:
        history_repo: Workout history repository (injected)

    Returns:
        WorkoutHistoryService: Comparison and history listings
    """
    return WorkoutHistoryService(history_repo)


def get_split_service(
    split_repo: SplitRepository = Depends(get_split_repo),
    log_repo: WorkoutLogRepository = Depends(get_workout_log_repo),
) -> SplitService:
    """Get SplitService with injected repositories."""
    return SplitService(split_repo, log_repo)


def get_workout_log_service(
    log_repo: WorkoutLogRepository = Depends(get_workout_log_repo),
    split_repo: SplitRepository = Depends(get_split_repo),
) -> WorkoutLogService:
    """Get WorkoutLogService with injected repositories."""
    return WorkoutLogService(log_repo, split_repo)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> str:
    """
    Get the current authenticated user ID.

    Wraps backend.auth.get_current_user for dependency injection.
    Supports:
    - Supabase access token (HS256)
    - API key authentication

    Args:
        authorization: Bearer token header
        x_api_key: API key header

    Returns:
        str: User ID from authentication

    Raises:
        HTTPException: 401 if authentication fails
    """
    return await _get_current_user(
        authorization=authorization,
        x_api_key=x_api_key,
    )


async def get_optional_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> Optional[str]:
    """
    Get the current user ID if authenticated, None otherwise.

    Args:
        authorization: Bearer token header
        x_api_key: API key header

    Returns:
        Optional[str]: User ID if authenticated, None otherwise
    """
    return await _get_optional_user(
        authorization=authorization,
        x_api_key=x_api_key,
    )


# =============================================================================
# Exports
# =============================================================================

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
