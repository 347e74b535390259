"""Dicho domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from jerga.domain.error import NotFoundError
from jerga.domain.model import Dicho
from jerga.domain.repository import DichoRepository, TermRepository
from jerga.domain.value import DichoId, Region, TermId, UserId

from .base import Service


class DichoService(Service):
    """Domain service for sayings attached to terms."""

    def __init__(
        self, dicho_repository: DichoRepository, term_repository: TermRepository
    ) -> None:
        self.dicho_repository = dicho_repository
        self.term_repository = term_repository

    async def create_dicho(
        self,
        term_id: TermId,
        author_id: UserId,
        content: str,
        translation: Optional[str] = None,
        region: Region = Region.GENERAL,
    ) -> Dicho:
        """Add a saying to a term.

        Raises:
            NotFoundError: If the term does not exist
        """
        with logfire.span(
            "dicho_service.create_dicho", term_id=str(term_id), author_id=author_id
        ):
            term = await self.term_repository.find_by_id(term_id)
            if not term or not term.is_active:
                logfire.warn("Term not found", term_id=str(term_id))
                raise NotFoundError("Term", str(term_id))

            dicho = await self.dicho_repository.save(
                Dicho(
                    id=DichoId(uuid4()),
                    term_id=term_id,
                    content=content,
                    translation=translation,
                    author_id=author_id,
                    region=region,
                )
            )
            logfire.info("Dicho created", dicho_id=str(dicho.id), term_id=str(term_id))
            return dicho

    async def list_dichos(
        self, term_id: TermId, region: Optional[Region] = None, limit: int = 20
    ) -> list[Dicho]:
        with logfire.span("dicho_service.list_dichos", term_id=str(term_id)):
            return await self.dicho_repository.find_by_term(term_id, region, limit)
