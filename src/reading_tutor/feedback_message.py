"""Feedback Message: reaction text plus references to passage highlights."""

import logging
import re
from typing import List, Sequence

from .highlight import Highlight

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(r"!!\s*([+-]?\d+)\s*!!")


class FeedbackMessage:
    """Parsed reaction specification, e.g. ``"Good job;!!-1!! !!+1!!"``.

    ``-n`` refers to the n-th highlight before the question (``-1`` is the
    nearest one), ``+n`` or ``n`` to the n-th highlight after it. References
    are plain integers until ``link_highlights`` resolves them, since
    reactions are parsed before the passage's highlights exist.
    """

    def __init__(self, reaction_spec: str):
        self.spec = reaction_spec or ""
        self.highlight_refs_before: List[int] = []
        self.highlight_refs_after: List[int] = []
        self.resolved_highlights: List[Highlight] = []

        for match in TOKEN_PATTERN.finditer(self.spec):
            ref = int(match.group(1))
            if ref < 0:
                self.highlight_refs_before.append(-ref)
            elif ref > 0:
                self.highlight_refs_after.append(ref)
            else:
                logger.warning(f"Ignoring highlight reference 0 in reaction {self.spec!r}")

        self.display_text = self._strip_references(self.spec)

    @staticmethod
    def _strip_references(spec: str) -> str:
        text = TOKEN_PATTERN.sub("", spec)
        head, sep, tail = text.rpartition(";")
        if sep and not tail.strip():
            text = head
        return re.sub(r"[ \t]{2,}", " ", text).strip()

    def link_highlights(self, highlights_before: Sequence[Highlight],
                        highlights_after: Sequence[Highlight]):
        """Resolve stored references against concrete highlights.

        Out-of-range references are dropped; the text still displays.
        """
        resolved: List[Highlight] = []
        for ref in self.highlight_refs_before:
            if ref <= len(highlights_before):
                resolved.append(highlights_before[len(highlights_before) - ref])
            else:
                logger.warning(f"Highlight reference -{ref} out of range "
                               f"({len(highlights_before)} before); dropped.")
        for ref in self.highlight_refs_after:
            if ref <= len(highlights_after):
                resolved.append(highlights_after[ref - 1])
            else:
                logger.warning(f"Highlight reference +{ref} out of range "
                               f"({len(highlights_after)} after); dropped.")

        self.resolved_highlights = []
        for highlight in resolved:
            if all(highlight is not h for h in self.resolved_highlights):
                self.resolved_highlights.append(highlight)

    @property
    def has_text(self) -> bool:
        return bool(self.display_text)

    def __repr__(self):
        return (f"FeedbackMessage({self.display_text!r}, before={self.highlight_refs_before}, "
                f"after={self.highlight_refs_after})")
