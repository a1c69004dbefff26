"""Answer: one authored response definition for a blank."""

import logging
import re
from typing import Optional, Sequence

from .edit_distance import distance
from .evaluation import Evaluation
from .feedback_message import FeedbackMessage
from .highlight import Highlight
from .settings import ConfigurationError, Settings

logger = logging.getLogger(__name__)

ALTERNATIVE_SEPARATORS = re.compile(r"[;|]")


class Answer:
    """A correct or incorrect answer the content author entered for a blank.

    ``answer_text`` holds equivalent alternatives separated by ``|`` or ``;``
    (e.g. ``"colour|color"``). A blank ``answer_text`` makes an answer that
    applies to any input; it keeps a single empty alternative and callers
    decide when it applies.
    """

    def __init__(self, answer_text: str, reaction_spec: str, settings: Settings):
        answer_text = answer_text or ""
        self.settings = settings
        self.applies_always = answer_text.strip() == ""
        if self.applies_always:
            self.alternatives = [""]
        else:
            tokens = (s.strip() for s in ALTERNATIVE_SEPARATORS.split(answer_text))
            self.alternatives = [s for s in tokens if s]
            if not self.alternatives:
                raise ConfigurationError(f"Answer {answer_text!r} has no usable alternatives")
        self.message = FeedbackMessage(reaction_spec)

    def link_highlights(self, highlights_before: Sequence[Highlight],
                        highlights_after: Sequence[Highlight]):
        self.message.link_highlights(highlights_before, highlights_after)

    def activate_highlights(self):
        for highlight in self.message.resolved_highlights:
            highlight.activate()

    def clean_text(self, text: str) -> str:
        if not self.settings.case_sensitive:
            return text.lower()
        return text

    def acceptable_typo_count(self, entered_text: str) -> int:
        if self.settings.warn_spelling_errors:
            return len(entered_text) // 10 + 1
        return 0

    def evaluate(self, entered_text: str) -> Evaluation:
        """Classify ``entered_text`` against every alternative.

        An exact match wins immediately; a close match is only remembered,
        since a later alternative may still match exactly.
        """
        cleaned_entered = self.clean_text(entered_text)
        tolerance = self.acceptable_typo_count(entered_text)
        best = Evaluation.NoMatch

        for alternative in self.alternatives:
            cleaned_alternative = self.clean_text(alternative)
            if cleaned_alternative == cleaned_entered:
                return Evaluation.ExactMatch

            changes = distance(cleaned_entered, cleaned_alternative)
            logger.debug(f"'{entered_text}' vs '{alternative}': distance={changes}, tolerance={tolerance}")
            if changes <= tolerance:
                best = Evaluation.CloseMatch

        return best

    def closest_alternative(self, entered_text: str) -> Optional[str]:
        """The alternative nearest to ``entered_text`` within the typo
        tolerance, or None when none is close enough."""
        cleaned_entered = self.clean_text(entered_text)
        tolerance = self.acceptable_typo_count(entered_text)
        closest, closest_changes = None, None
        for alternative in self.alternatives:
            changes = distance(cleaned_entered, self.clean_text(alternative))
            if changes <= tolerance and (closest_changes is None or changes < closest_changes):
                closest, closest_changes = alternative, changes
        return closest

    def __repr__(self):
        return f"Answer({'|'.join(self.alternatives)!r}, applies_always={self.applies_always})"
