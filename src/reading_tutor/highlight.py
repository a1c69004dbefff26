"""Highlights: markable spans of the reading passage."""

import logging
import re
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

# "3**some words**" marks span 3 of the passage
MARKER_PATTERN = re.compile(r"(\d+)\*\*(.*?)\*\*", re.DOTALL)


class Highlight:
    """One addressable span of the passage, identified by its marker number."""

    def __init__(self, highlight_id: int, text: str = ""):
        self.id = highlight_id
        self.text = text
        self.is_highlighted = False

    def activate(self):
        self.is_highlighted = True

    def deactivate(self):
        self.is_highlighted = False

    def is_active(self) -> bool:
        return self.is_highlighted

    def __repr__(self):
        state = "on" if self.is_highlighted else "off"
        return f"Highlight({self.id}, {self.text!r}, {state})"


class Passage:
    """Source text with its highlight spans.

    Markers of the form ``N**text**`` become ``Highlight`` objects with id ``N``.
    Highlights live as long as the passage; retrying an exercise only
    deactivates them.
    """

    def __init__(self, text: str):
        self.text = text or ""
        self.highlights: List[Highlight] = []
        self._by_id: Dict[int, Highlight] = {}
        self._marker_start: Dict[int, int] = {}
        for match in MARKER_PATTERN.finditer(self.text):
            highlight_id = int(match.group(1))
            if highlight_id in self._by_id:
                logger.warning(f"Duplicate highlight marker {highlight_id}; keeping the first one.")
                continue
            highlight = Highlight(highlight_id, match.group(2))
            self.highlights.append(highlight)
            self._by_id[highlight_id] = highlight
            self._marker_start[highlight_id] = match.start()
        logger.debug(f"Passage parsed with {len(self.highlights)} highlight(s).")

    def get(self, highlight_id: int) -> Optional[Highlight]:
        return self._by_id.get(highlight_id)

    def highlights_around(self, question_number: int) -> Tuple[List[Highlight], List[Highlight]]:
        """Split highlights into those up to and including marker
        ``question_number`` and those after it, both ordered by id."""
        ordered = sorted(self.highlights, key=lambda h: h.id)
        before = [h for h in ordered if h.id <= question_number]
        after = [h for h in ordered if h.id > question_number]
        return before, after

    def active_highlights(self) -> List[Highlight]:
        return [h for h in self.highlights if h.is_active()]

    def reset_highlights(self):
        for highlight in self.highlights:
            highlight.deactivate()

    def plain_text(self) -> str:
        return MARKER_PATTERN.sub(lambda m: m.group(2), self.text)

    def render(self, marker: str = "[{}]") -> str:
        """Passage text with active highlights wrapped by ``marker``."""
        def replace(match):
            highlight_id = int(match.group(1))
            highlight = self._by_id.get(highlight_id)
            text = match.group(2)
            # ignored duplicates of a marker stay plain
            if self._marker_start.get(highlight_id) != match.start():
                return text
            if highlight is not None and highlight.is_active():
                return marker.format(text)
            return text

        return MARKER_PATTERN.sub(replace, self.text)
