"""Badge catalog.

Badges are static achievements defined in code. Each badge has one or
more criteria over the user's state; all must hold for the badge to be
awarded. Catalog order is the evaluation order.
"""

import operator
from enum import Enum
from typing import Any, Callable

from jerga.domain.model.common import DomainModel

# Bump whenever a badge is added, removed or its criteria change
BADGE_CATALOG_VERSION = 1


class CriterionOperator(str, Enum):
    """Comparison applied between a user value and a threshold."""

    GTE = "gte"
    GT = "gt"
    EQ = "eq"
    LT = "lt"
    LTE = "lte"


_COMPARATORS: dict[CriterionOperator, Callable[[Any, Any], bool]] = {
    CriterionOperator.GTE: operator.ge,
    CriterionOperator.GT: operator.gt,
    CriterionOperator.EQ: operator.eq,
    CriterionOperator.LT: operator.lt,
    CriterionOperator.LTE: operator.le,
}


def resolve_field(subject: Any, path: str) -> Any:
    """Resolve a dotted attribute path on a model.

    Missing attributes (or None along the way) evaluate as 0.
    """
    current = subject
    for part in path.split("."):
        current = getattr(current, part, None)
        if current is None:
            return 0
    return current


class BadgeCriterion(DomainModel):
    """A single (field path, operator, threshold) rule."""

    field: str
    operator: CriterionOperator
    threshold: int

    def current_value(self, subject: Any) -> Any:
        return resolve_field(subject, self.field)

    def is_met(self, subject: Any) -> bool:
        return _COMPARATORS[self.operator](self.current_value(subject), self.threshold)


class Badge(DomainModel):
    """Catalog entry for an achievement."""

    id: str
    name: str
    description: str
    icon: str
    color: str
    criteria: list[BadgeCriterion]

    def is_earned_by(self, subject: Any) -> bool:
        """All criteria must hold."""
        return all(criterion.is_met(subject) for criterion in self.criteria)

    def progress(self, subject: Any) -> float:
        """Percentage progress towards the first criterion, capped at 100."""
        if not self.criteria:
            return 0.0
        criterion = self.criteria[0]
        if criterion.threshold <= 0:
            return 100.0
        current = criterion.current_value(subject)
        return min(current / criterion.threshold * 100, 100.0)


def _gte(field: str, threshold: int) -> BadgeCriterion:
    return BadgeCriterion(
        field=field, operator=CriterionOperator.GTE, threshold=threshold
    )


BADGE_CATALOG: tuple[Badge, ...] = (
    Badge(
        id="newbie",
        name="Novato",
        description="Bienvenido a JergaDic",
        icon="🎯",
        color="gray",
        criteria=[_gte("contributions.terms_submitted", 1)],
    ),
    Badge(
        id="contributor",
        name="Contribuidor",
        description="Ha enviado 10 términos",
        icon="📝",
        color="blue",
        criteria=[_gte("contributions.terms_submitted", 10)],
    ),
    Badge(
        id="active_voter",
        name="Votante Activo",
        description="Ha dado 50 votos",
        icon="👍",
        color="green",
        criteria=[_gte("contributions.votes_given", 50)],
    ),
    Badge(
        id="definition_master",
        name="Maestro de Definiciones",
        description="Ha enviado 25 definiciones",
        icon="📖",
        color="purple",
        criteria=[_gte("contributions.definitions_submitted", 25)],
    ),
    Badge(
        id="regional_expert",
        name="Experto Regional",
        description="Ha enviado 20 términos de su región",
        icon="🌍",
        color="yellow",
        criteria=[_gte("contributions.terms_submitted", 20)],
    ),
    Badge(
        id="dictionary_builder",
        name="Constructor del Diccionario",
        description="Ha enviado 50 términos",
        icon="🏗️",
        color="orange",
        criteria=[_gte("contributions.terms_submitted", 50)],
    ),
    Badge(
        id="community_helper",
        name="Ayudante de la Comunidad",
        description="Ha dado 100 votos positivos",
        icon="🤝",
        color="pink",
        criteria=[_gte("contributions.votes_given", 100)],
    ),
    Badge(
        id="top_contributor",
        name="Contribuidor Top",
        description="Ha enviado 100 términos",
        icon="🏆",
        color="gold",
        criteria=[_gte("contributions.terms_submitted", 100)],
    ),
    Badge(
        id="legend",
        name="Leyenda",
        description="Más de 500 contribuciones totales",
        icon="⭐",
        color="rainbow",
        criteria=[_gte("reputation", 1000)],
    ),
)

_BADGES_BY_ID = {badge.id: badge for badge in BADGE_CATALOG}


def get_badge(badge_id: str) -> Badge | None:
    """Look up a catalog badge by id."""
    return _BADGES_BY_ID.get(badge_id)
