"""Badge domain service."""

from dataclasses import dataclass

import logfire

from jerga.domain.error import NotFoundError
from jerga.domain.model import BADGE_CATALOG, Badge, get_badge
from jerga.domain.repository import UserRepository
from jerga.domain.value import NotificationType, RelatedType, UserId

from .base import Service
from .notification_service import NotificationService

# Number of unearned badges shown as upcoming goals
NEXT_BADGES_SHOWN = 3


@dataclass
class BadgeProgress:
    """A user's earned badges and progress towards the next ones."""

    earned: list[Badge]
    next: list[Badge]
    progress: dict[str, float]


class BadgeService(Service):
    """Evaluates the badge catalog against a user and awards badges.

    Awards are monotonic: a badge is never removed once granted.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize badge service.

        Args:
            user_repository: User repository
            notification_service: Notification service for award notices
        """
        self.user_repository = user_repository
        self.notification_service = notification_service

    async def evaluate(self, user_id: UserId) -> list[str]:
        """Award every catalog badge whose criteria the user now meets.

        Badges are evaluated in catalog order. Each new award emits one
        notification; a failed notification is logged and evaluation
        continues.

        Args:
            user_id: User ID

        Returns:
            IDs of badges newly awarded by this call

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("badge_service.evaluate", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("Badge evaluation for unknown user", user_id=user_id)
                raise NotFoundError("User", user_id)

            held = set(user.badges)
            awarded: list[str] = []

            for badge in BADGE_CATALOG:
                if badge.id in held or not badge.is_earned_by(user):
                    continue

                added = await self.user_repository.add_badge(user_id, badge.id)
                if not added:
                    # Awarded concurrently by another request
                    continue

                awarded.append(badge.id)
                logfire.info("Badge awarded", user_id=user_id, badge_id=badge.id)
                await self._notify_award(user_id, badge)

            return awarded

    async def _notify_award(self, user_id: UserId, badge: Badge) -> None:
        try:
            await self.notification_service.emit(
                user_id=user_id,
                type=NotificationType.BADGE_EARNED,
                title=f"¡Nueva insignia desbloqueada! {badge.icon}",
                message=f'Has ganado la insignia "{badge.name}": {badge.description}',
                related_id=badge.id,
                related_type=RelatedType.BADGE,
            )
        except Exception as e:
            logfire.error(
                "Badge notification failed",
                user_id=user_id,
                badge_id=badge.id,
                error=str(e),
            )

    async def get_progress(self, user_id: UserId) -> BadgeProgress:
        """Earned badges, the next unearned badges and progress towards them.

        Progress is measured against each badge's first criterion.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("badge_service.get_progress", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                raise NotFoundError("User", user_id)

            earned = [b for b in (get_badge(bid) for bid in user.badges) if b]
            upcoming = [b for b in BADGE_CATALOG if b.id not in user.badges]
            upcoming = upcoming[:NEXT_BADGES_SHOWN]

            return BadgeProgress(
                earned=earned,
                next=upcoming,
                progress={badge.id: badge.progress(user) for badge in upcoming},
            )
