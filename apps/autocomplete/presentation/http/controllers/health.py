"""Health Controller."""

from fastapi import APIRouter

from autocomplete.setup.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "healthy", "service": get_settings().service_name}


@router.get("/ping")
async def ping() -> dict[str, str]:
    return {"pong": "ok"}
