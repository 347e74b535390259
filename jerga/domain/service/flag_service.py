"""Flag domain service."""

from typing import Optional
from uuid import UUID, uuid4

import logfire

from jerga.domain.error import DuplicateFlagError, NotFoundError, ValidationError
from jerga.domain.model import Flag
from jerga.domain.model.common import utcnow
from jerga.domain.repository import (
    CommentRepository,
    DefinitionRepository,
    DichoRepository,
    FlagRepository,
    TermRepository,
)
from jerga.domain.value import (
    FlagId,
    FlagReason,
    FlagStatus,
    FlagTargetType,
    UserId,
)

from .base import Service


class FlagService(Service):
    """Domain service for content reports and their moderation."""

    def __init__(
        self,
        flag_repository: FlagRepository,
        term_repository: TermRepository,
        definition_repository: DefinitionRepository,
        comment_repository: CommentRepository,
        dicho_repository: DichoRepository,
    ) -> None:
        """Initialize flag service.

        Args:
            flag_repository: Flag repository
            term_repository: Term repository
            definition_repository: Definition repository
            comment_repository: Comment repository
            dicho_repository: Dicho repository
        """
        self.flag_repository = flag_repository
        self.term_repository = term_repository
        self.definition_repository = definition_repository
        self.comment_repository = comment_repository
        self.dicho_repository = dicho_repository

    async def _target_exists(self, target_type: FlagTargetType, target_id: UUID) -> bool:
        if target_type == FlagTargetType.TERM:
            target = await self.term_repository.find_by_id(target_id)
        elif target_type == FlagTargetType.DEFINITION:
            target = await self.definition_repository.find_by_id(target_id)
        elif target_type == FlagTargetType.COMMENT:
            target = await self.comment_repository.find_by_id(target_id)
        else:
            target = await self.dicho_repository.find_by_id(target_id)
        return target is not None and target.is_active

    async def create_flag(
        self,
        reporter_id: UserId,
        target_type: FlagTargetType,
        target_id: UUID,
        reason: FlagReason,
        custom_reason: Optional[str] = None,
    ) -> Flag:
        """Report a piece of content.

        Args:
            reporter_id: Reporting user
            target_type: Type of content
            target_id: ID of content
            reason: Report reason
            custom_reason: Free text, required when reason is "other"

        Returns:
            The pending flag

        Raises:
            NotFoundError: If the target does not exist
            DuplicateFlagError: If the reporter already has an open flag on it
            ValidationError: If reason is "other" without a custom reason
        """
        with logfire.span(
            "flag_service.create_flag",
            reporter_id=reporter_id,
            target_type=target_type.value,
            target_id=str(target_id),
            reason=reason.value,
        ):
            if reason == FlagReason.OTHER and not (custom_reason or "").strip():
                raise ValidationError("A custom reason is required for 'other'")

            if not await self._target_exists(target_type, target_id):
                logfire.warn(
                    "Flag target not found",
                    target_type=target_type.value,
                    target_id=str(target_id),
                )
                raise NotFoundError(target_type.value.capitalize(), str(target_id))

            existing = await self.flag_repository.find_open_by_reporter(
                reporter_id, target_type, target_id
            )
            if existing:
                logfire.warn(
                    "Duplicate flag rejected",
                    reporter_id=reporter_id,
                    flag_id=str(existing.id),
                )
                raise DuplicateFlagError(target_type.value, str(target_id))

            flag = await self.flag_repository.save(
                Flag(
                    id=FlagId(uuid4()),
                    reporter_id=reporter_id,
                    target_type=target_type,
                    target_id=target_id,
                    reason=reason,
                    custom_reason=custom_reason,
                )
            )
            logfire.info("Flag created", flag_id=str(flag.id))
            return flag

    async def list_flags(
        self, status: Optional[FlagStatus] = FlagStatus.PENDING, limit: int = 20
    ) -> list[Flag]:
        """Flags in a status, newest first; None lists every flag."""
        with logfire.span(
            "flag_service.list_flags", status=status.value if status else None
        ):
            return await self.flag_repository.find_by_status(status, limit)

    async def review_flag(
        self,
        flag_id: FlagId,
        status: FlagStatus,
        moderator_id: UserId,
        moderator_notes: Optional[str] = None,
    ) -> Flag:
        """Record a moderator decision on a flag.

        Raises:
            NotFoundError: If the flag does not exist
        """
        with logfire.span(
            "flag_service.review_flag",
            flag_id=str(flag_id),
            status=status.value,
            moderator_id=moderator_id,
        ):
            flag = await self.flag_repository.update_review(
                flag_id, status, moderator_id, moderator_notes, utcnow()
            )
            if not flag:
                logfire.warn("Flag not found", flag_id=str(flag_id))
                raise NotFoundError("Flag", str(flag_id))

            logfire.info("Flag reviewed", flag_id=str(flag_id), status=status.value)
            return flag
