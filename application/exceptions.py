"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
Services translate them into tagged results or HTTP errors at the edge;
repositories raise them instead of leaking Supabase client errors.
"""


class WorkoutHistoryError(Exception):
    """Base class for errors surfaced while reading or writing workout data."""

    pass


class WorkoutNotFoundError(WorkoutHistoryError):
    """A session, split day, split or exercise could not be resolved.

    Also raised when a session exists but has no logged sets, since no
    snapshot can be built from it.
    """

    pass


class WorkoutAccessDeniedError(WorkoutHistoryError):
    """The resolved session belongs to a different user than the caller."""

    pass


class RepositoryError(WorkoutHistoryError):
    """The persistence backend failed. The client error is chained as __cause__."""

    pass


class SplitValidationError(WorkoutHistoryError):
    """A split draft or set payload failed domain validation."""

    pass
