"""Evaluation outcome of a learner response against an answer."""

from enum import IntEnum


class Evaluation(IntEnum):
    """Ordered by strength: ExactMatch > CloseMatch > NoMatch."""

    NoMatch = 0
    CloseMatch = 1
    ExactMatch = 2

    @property
    def is_correct(self) -> bool:
        return self is not Evaluation.NoMatch
