"""Counter effects of comment status changes.

Approved comments are counted on their post (``comments_count``) and, for
replies, on their parent (``replies_count``). Every status change moves both
counters by the same delta.
"""

from estate.domain.value import CommentStatus


def transition_delta(current: CommentStatus, target: CommentStatus) -> int:
    """Counter delta for moving a comment from ``current`` to ``target``.

    Entering ``approved`` counts +1, leaving it counts -1, anything else is 0.
    Approving an approved comment is 0.
    """
    was_counted = current == CommentStatus.APPROVED
    is_counted = target == CommentStatus.APPROVED
    return int(is_counted) - int(was_counted)


def removal_delta(current: CommentStatus) -> int:
    """Counter delta for deleting a comment in status ``current``."""
    return -1 if current == CommentStatus.APPROVED else 0
