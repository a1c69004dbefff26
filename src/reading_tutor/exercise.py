"""Exercise: loads a reading task and scores the learner's responses."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import yaml

from .answer import Answer
from .blank import Blank, BlankResult
from .highlight import Passage
from .settings import Behaviour, ConfigurationError, Settings

logger = logging.getLogger(__name__)

CHECK_ANSWER = "check-answer"
SHOW_SOLUTION = "show-solution"
TRY_AGAIN = "try-again"


def load_task(path: str) -> dict:
    """Read a task definition from a JSON or YAML file."""
    task_path = Path(path)
    with open(task_path, "r", encoding="utf-8") as f:
        if task_path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)
    if not isinstance(data, dict):
        raise ConfigurationError(f"Task file {task_path} must contain a mapping")
    return data


def _as_text(value) -> str:
    return "" if value is None else str(value)


def _build_answers(entries, settings: Settings) -> List[Answer]:
    """Answers from a list of plain values (numbers included, e.g. a year)
    or ``{text, reaction}`` mappings."""
    if isinstance(entries, (str, int, float)):
        entries = [entries]
    answers = []
    for entry in entries or []:
        if isinstance(entry, (str, int, float)):
            answers.append(Answer(str(entry), "", settings))
        elif isinstance(entry, dict):
            answers.append(Answer(_as_text(entry.get("text")),
                                  _as_text(entry.get("reaction")), settings))
        else:
            raise ConfigurationError(f"Unsupported answer entry {entry!r}")
    return answers


def build_blank(question: dict, settings: Settings) -> Blank:
    """Create a blank from either ``targets`` (each one a correct answer) or
    explicit ``correct``/``incorrect`` answer lists."""
    correct = _build_answers(question.get("targets"), settings)
    correct += _build_answers(question.get("correct"), settings)
    incorrect = _build_answers(question.get("incorrect"), settings)
    return Blank(question.get("question", ""), correct, incorrect, settings)


class Exercise:
    """A passage with one blank per question plus the scoring rules around them."""

    def __init__(self, task_data: dict, settings: Optional[Settings] = None,
                 behaviour: Optional[Behaviour] = None):
        questions = task_data.get("questions") or []
        if not questions:
            raise ConfigurationError("Exercise has no questions")

        self.task = task_data.get("task", "")
        self.settings = settings or Settings.from_dict(task_data.get("evaluation"))
        self.behaviour = behaviour or Behaviour.from_dict(task_data.get("behaviour"))
        self.passage = Passage(task_data.get("passage", ""))
        self.blanks = [build_blank(q, self.settings) for q in questions]

        # highlights exist only now, so answers are linked after parsing
        for i, blank in enumerate(self.blanks):
            before, after = self.passage.highlights_around(i + 1)
            blank.link_highlights(before, after)

        self._buttons: Dict[str, bool] = {CHECK_ANSWER: True, SHOW_SOLUTION: False, TRY_AGAIN: False}
        logger.info(f"Exercise loaded: {len(self.blanks)} question(s), "
                    f"{len(self.passage.highlights)} highlight(s), {self.settings!r}")

    @classmethod
    def from_file(cls, path: str, settings: Optional[Settings] = None,
                  behaviour: Optional[Behaviour] = None) -> "Exercise":
        return cls(load_task(path), settings=settings, behaviour=behaviour)

    def get_answer_given(self, responses: Sequence[str]) -> bool:
        """True when every blank has non-blank input."""
        self._check_length(responses)
        return all((r or "").strip() for r in responses)

    def check(self, responses: Sequence[str]) -> List[BlankResult]:
        """Evaluate all blanks. Locked blanks keep their previous result."""
        self._check_length(responses)
        results = []
        for blank, response in zip(self.blanks, responses):
            if blank.locked and blank.last_result is not None:
                # highlights were cleared by reset_task
                if blank.last_result.answer is not None:
                    blank.last_result.answer.activate_highlights()
                results.append(blank.last_result)
                continue
            result = blank.evaluate_attempt(response)
            if result.is_correct or not self.behaviour.enable_retry:
                blank.lock()
            results.append(result)

        self._update_buttons()
        logger.info(f"Checked exercise: {self.get_score()}/{self.get_max_score()}")
        return results

    def _check_length(self, responses: Sequence[str]):
        if len(responses) != len(self.blanks):
            raise ValueError(f"Expected {len(self.blanks)} responses, got {len(responses)}")

    def _update_buttons(self):
        self._buttons[CHECK_ANSWER] = False
        incomplete = self.get_score() != self.get_max_score()
        self._buttons[SHOW_SOLUTION] = incomplete and self.behaviour.enable_solutions_button
        self._buttons[TRY_AGAIN] = incomplete and self.behaviour.enable_retry

    def get_score(self) -> int:
        return sum(1 for blank in self.blanks if blank.is_correct)

    def get_max_score(self) -> int:
        return len(self.blanks)

    def is_passed(self) -> bool:
        return self.get_score() == self.get_max_score()

    def show_solutions(self) -> List[str]:
        """Reveal the first correct alternative of every blank and lock them."""
        solutions = []
        for blank in self.blanks:
            blank.lock()
            solutions.append(blank.solution())
        self._buttons[SHOW_SOLUTION] = False
        self._buttons[TRY_AGAIN] = False
        return solutions

    def reset_task(self):
        """Clear incorrect blanks for a retry; correct ones stay answered."""
        for blank in self.blanks:
            if not blank.is_correct:
                blank.reset()
        self.passage.reset_highlights()
        self._buttons = {CHECK_ANSWER: True, SHOW_SOLUTION: False, TRY_AGAIN: False}
        logger.info("Exercise reset for retry.")

    def buttons(self) -> Dict[str, bool]:
        return dict(self._buttons)

    def responses(self) -> List[str]:
        return [blank.entered_text for blank in self.blanks]
