"""Test configuration and factories for domain entities."""

from uuid import uuid4

from jerga.domain.model import Comment, Definition, Dicho, Term, User
from jerga.domain.repository import (
    CommentRepository,
    DefinitionRepository,
    DichoRepository,
    TermRepository,
    UserRepository,
)
from jerga.domain.value import (
    CommentId,
    ContributionCounters,
    DefinitionId,
    DichoId,
    Region,
    TermId,
    UserId,
    UserRole,
    Word,
)


def make_user(
    user_id: str | None = None,
    role: UserRole = UserRole.USER,
    contributions: ContributionCounters | None = None,
) -> User:
    """Build a user with a random identity-provider subject."""
    subject = user_id or f"user_{uuid4().hex[:12]}"
    return User(
        id=UserId(subject),
        name=f"Usuario {subject[-4:]}",
        email=f"{subject}@example.com",
        role=role,
        contributions=contributions or ContributionCounters(),
    )


async def seed_user(user_repository: UserRepository, **kwargs) -> User:
    return await user_repository.save(make_user(**kwargs))


async def seed_term(
    term_repository: TermRepository,
    word: str = "chévere",
    region: Region = Region.GENERAL,
    author_id: str = "author",
    **kwargs,
) -> Term:
    term = Term(
        id=TermId(uuid4()),
        word=Word(word),
        region=region,
        author_id=UserId(author_id),
        **kwargs,
    )
    return await term_repository.save(term)


async def seed_definition(
    definition_repository: DefinitionRepository,
    term: Term,
    author_id: str = "author",
    content: str = "Algo muy bueno o agradable.",
    **kwargs,
) -> Definition:
    definition = Definition(
        id=DefinitionId(uuid4()),
        term_id=term.id,
        content=content,
        author_id=UserId(author_id),
        region=term.region,
        **kwargs,
    )
    return await definition_repository.save(definition)


async def seed_comment(
    comment_repository: CommentRepository,
    definition: Definition,
    author_id: str = "commenter",
    content: str = "¡Qué buena definición!",
) -> Comment:
    comment = Comment(
        id=CommentId(uuid4()),
        definition_id=definition.id,
        author_id=UserId(author_id),
        content=content,
    )
    return await comment_repository.save(comment)


async def seed_dicho(
    dicho_repository: DichoRepository,
    term: Term,
    author_id: str = "author",
    content: str = "Está chévere la vaina.",
) -> Dicho:
    dicho = Dicho(
        id=DichoId(uuid4()),
        term_id=term.id,
        content=content,
        author_id=UserId(author_id),
    )
    return await dicho_repository.save(dicho)
