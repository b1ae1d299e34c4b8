"""
Router package for the Split Tracker API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- workout_history: Workout comparison, weekly history and recent workouts
- splits: Training split authoring
- workouts: Session logging
- account: Account data deletion
"""

from api.routers.account import router as account_router
from api.routers.health import router as health_router
from api.routers.splits import router as splits_router
from api.routers.workout_history import router as workout_history_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "account_router",
    "health_router",
    "splits_router",
    "workout_history_router",
    "workouts_router",
]
