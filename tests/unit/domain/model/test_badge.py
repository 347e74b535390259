"""Unit tests for the badge catalog."""

from jerga.domain.model import BADGE_CATALOG, get_badge
from jerga.domain.value import ContributionCounters
from tests.conftest import make_user


def test_catalog_ids_are_unique():
    ids = [badge.id for badge in BADGE_CATALOG]
    assert len(ids) == len(set(ids))


def test_newbie_earned_with_first_term():
    badge = get_badge("newbie")
    user = make_user(contributions=ContributionCounters(terms_submitted=1))

    assert badge.is_earned_by(user)
    assert not badge.is_earned_by(make_user())


def test_legend_reads_reputation():
    badge = get_badge("legend")

    assert badge.is_earned_by(make_user().model_copy(update={"reputation": 1000}))
    assert not badge.is_earned_by(make_user().model_copy(update={"reputation": 999}))


def test_progress_is_capped_at_100():
    badge = get_badge("contributor")
    halfway = make_user(contributions=ContributionCounters(terms_submitted=5))
    beyond = make_user(contributions=ContributionCounters(terms_submitted=40))

    assert badge.progress(halfway) == 50.0
    assert badge.progress(beyond) == 100.0


def test_unknown_badge_is_none():
    assert get_badge("does_not_exist") is None
