# src/workshop_api/api/v1/endpoints/system.py
"""Root and health endpoints."""

from fastapi import APIRouter

router = APIRouter(tags=["system"])


@router.get("/")
async def root() -> dict[str, str]:
    """Welcome message for workshop participants."""
    return {"message": "Welcome to the API for tech writers workshop"}


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}
