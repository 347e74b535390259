"""User routes: leaderboard, badges and identity-provider sync."""

import hmac

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, Query, status

from jerga.application.usecase.user import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
    GetUserBadgesRequest,
    GetUserBadgesResponse,
    GetUserBadgesUseCase,
    SyncUserRequest,
    SyncUserUseCase,
    UserProfileResponse,
)
from jerga.config import AuthSettings
from jerga.domain.service import JWTService
from jerga.domain.value import LeaderboardField
from jerga.interface.api.auth import current_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/leaderboard", response_model=GetLeaderboardResponse)
async def get_leaderboard(
    get_leaderboard_use_case: FromDishka[GetLeaderboardUseCase],
    type: LeaderboardField = LeaderboardField.REPUTATION,
    limit: int = Query(default=10, ge=1, le=50),
) -> GetLeaderboardResponse:
    """Top contributors ordered by the chosen counter."""
    return await get_leaderboard_use_case.execute(
        GetLeaderboardRequest(type=type, limit=limit)
    )


@router.get("/badges", response_model=GetUserBadgesResponse)
async def get_user_badges(
    get_user_badges_use_case: FromDishka[GetUserBadgesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetUserBadgesResponse:
    """The caller's earned badges and progress towards the next ones.

    Requires authentication.
    """
    user_id = current_user_id(jwt_service, auth_token, authorization)
    return await get_user_badges_use_case.execute(
        GetUserBadgesRequest(user_id=user_id)
    )


@router.post("/sync", response_model=UserProfileResponse)
async def sync_user(
    request: SyncUserRequest,
    sync_user_use_case: FromDishka[SyncUserUseCase],
    auth_settings: FromDishka[AuthSettings],
    x_webhook_secret: str | None = Header(default=None),
) -> UserProfileResponse:
    """Create or update a profile from identity-provider data.

    Called by the identity provider's webhook with the shared secret in the
    ``X-Webhook-Secret`` header.

    Args:
        request: Profile fields pushed by the identity provider
        sync_user_use_case: Sync user use case from DI
        auth_settings: Holds the configured webhook secret
        x_webhook_secret: Shared secret header

    Returns:
        The stored profile

    Raises:
        HTTPException: 503 if no secret is configured, 401 if it does not match
    """
    if not auth_settings.webhook_secret:
        logfire.error("User sync called but no webhook secret is configured")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="User sync is not configured",
        )

    if not x_webhook_secret or not hmac.compare_digest(
        x_webhook_secret, auth_settings.webhook_secret
    ):
        logfire.warn("User sync rejected: bad webhook secret")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid webhook secret",
        )

    return await sync_user_use_case.execute(request)
