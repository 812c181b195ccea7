"""
Health Check Route
"""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    """Report that the service is up."""
    return {"status": "healthy"}
