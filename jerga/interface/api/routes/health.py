"""Liveness route."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from jerga.config import Settings
from jerga.domain.model.common import Clock

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness response."""

    status: str
    timestamp: datetime
    environment: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], clock: FromDishka[Clock]
) -> HealthResponse:
    """Report that the process is serving requests. Does not touch the database."""
    return HealthResponse(
        status="healthy",
        timestamp=clock(),
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
