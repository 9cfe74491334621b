"""Health check endpoint."""

from fastapi import APIRouter

from geolog.config import VERSION

router = APIRouter()


@router.get("/health")
def health_check() -> dict:
    """Service liveness."""
    return {"status": "healthy", "version": VERSION}
