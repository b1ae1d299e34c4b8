"""
Health check router.

This router provides the health check endpoint for monitoring and load balancers.
"""

from fastapi import APIRouter

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}
