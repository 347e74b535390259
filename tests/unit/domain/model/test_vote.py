"""Unit tests for vote state transitions."""

from jerga.domain.model import VoteAction, compute_transition
from jerga.domain.value import VoteType


class TestComputeTransition:
    """Every (existing, requested) pair maps to one ledger change."""

    def test_new_vote_is_created(self):
        transition = compute_transition(None, VoteType.UP)

        assert transition.action == VoteAction.CREATED
        assert transition.deltas == {VoteType.UP: 1}
        assert transition.resulting_vote_type == VoteType.UP

    def test_same_polarity_retracts(self):
        transition = compute_transition(VoteType.DOWN, VoteType.DOWN)

        assert transition.action == VoteAction.RETRACTED
        assert transition.deltas == {VoteType.DOWN: -1}
        assert transition.resulting_vote_type is None

    def test_other_polarity_flips(self):
        transition = compute_transition(VoteType.UP, VoteType.DOWN)

        assert transition.action == VoteAction.FLIPPED
        assert transition.deltas == {VoteType.UP: -1, VoteType.DOWN: 1}
        assert transition.resulting_vote_type == VoteType.DOWN

    def test_deltas_never_move_score_by_more_than_two(self):
        for existing in (None, VoteType.UP, VoteType.DOWN):
            for requested in VoteType:
                transition = compute_transition(existing, requested)
                score_delta = transition.deltas.get(
                    VoteType.UP, 0
                ) - transition.deltas.get(VoteType.DOWN, 0)
                assert abs(score_delta) <= 2
                assert not transition.is_noop
