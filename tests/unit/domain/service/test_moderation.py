"""Unit tests for comment counter deltas."""

import pytest

from estate.domain.service import removal_delta, transition_delta
from estate.domain.value import CommentStatus

APPROVED = CommentStatus.APPROVED
PENDING = CommentStatus.PENDING
REJECTED = CommentStatus.REJECTED
SPAM = CommentStatus.SPAM


class TestTransitionDelta:
    @pytest.mark.parametrize("current", [PENDING, REJECTED, SPAM])
    def test_entering_approved_counts(self, current):
        assert transition_delta(current, APPROVED) == 1

    @pytest.mark.parametrize("target", [PENDING, REJECTED, SPAM])
    def test_leaving_approved_uncounts(self, target):
        assert transition_delta(APPROVED, target) == -1

    def test_approved_to_approved_is_zero(self):
        assert transition_delta(APPROVED, APPROVED) == 0

    def test_between_uncounted_statuses_is_zero(self):
        assert transition_delta(PENDING, SPAM) == 0
        assert transition_delta(REJECTED, PENDING) == 0


class TestRemovalDelta:
    def test_only_approved_removal_uncounts(self):
        assert removal_delta(APPROVED) == -1
        assert removal_delta(PENDING) == 0
        assert removal_delta(SPAM) == 0
