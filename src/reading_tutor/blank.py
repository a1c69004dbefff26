"""Blank: one prompt of the exercise and the evaluation of attempts at it."""

import logging
from typing import List, Optional, Sequence

from .answer import Answer
from .evaluation import Evaluation
from .highlight import Highlight
from .settings import ConfigurationError, Settings

logger = logging.getLogger(__name__)


class BlankResult:
    """Holds the outcome of one attempt at a blank.

    ``evaluation`` is measured against the answer that decided the outcome,
    so an exact match on an authored *incorrect* answer is still not correct.
    """

    def __init__(self, evaluation: Evaluation, is_correct: bool, entered_text: str,
                 answer: Optional[Answer] = None, spelling_mistake: bool = False):
        self.evaluation = evaluation
        self.is_correct = is_correct
        self.entered_text = entered_text
        self.answer = answer
        self.spelling_mistake = spelling_mistake
        # alternative of the deciding answer nearest to the entered text
        self.matched_alternative: Optional[str] = None
        if answer is not None and not answer.applies_always:
            self.matched_alternative = answer.closest_alternative(entered_text)

    @property
    def message(self) -> str:
        if self.answer is None:
            return ""
        return self.answer.message.display_text

    @property
    def highlights(self) -> List[Highlight]:
        if self.answer is None:
            return []
        return list(self.answer.message.resolved_highlights)

    def to_dict(self) -> dict:
        return {
            "evaluation": self.evaluation.name,
            "is_correct": self.is_correct,
            "entered_text": self.entered_text,
            "spelling_mistake": self.spelling_mistake,
            "matched_alternative": self.matched_alternative,
            "message": self.message,
            "highlights": [h.id for h in self.highlights],
        }


class Blank:
    """A prompt with its correct and incorrect answers and the learner's state."""

    def __init__(self, question: str, correct_answers: Sequence[Answer],
                 incorrect_answers: Sequence[Answer], settings: Settings):
        if not correct_answers:
            raise ConfigurationError(f"Question {question!r} has no correct answer")
        self.question = question
        self.correct_answers = list(correct_answers)
        self.incorrect_answers = list(incorrect_answers)
        self.settings = settings

        self.entered_text = ""
        self.last_result: Optional[BlankResult] = None
        self.locked = False

    @property
    def is_correct(self) -> bool:
        return self.last_result is not None and self.last_result.is_correct

    @property
    def evaluation(self) -> Evaluation:
        if self.last_result is None:
            return Evaluation.NoMatch
        return self.last_result.evaluation

    def link_highlights(self, highlights_before: Sequence[Highlight],
                        highlights_after: Sequence[Highlight]):
        for answer in self.correct_answers + self.incorrect_answers:
            answer.link_highlights(highlights_before, highlights_after)

    @staticmethod
    def _first_with(answers: Sequence[Answer], text: str, wanted: Evaluation) -> Optional[Answer]:
        for answer in answers:
            if not answer.applies_always and answer.evaluate(text) == wanted:
                return answer
        return None

    def evaluate_attempt(self, entered_text: str) -> BlankResult:
        """Classify an attempt and activate the highlights that justify it.

        Preference: exact correct, exact incorrect, close correct, close
        incorrect. Answers that apply always are only consulted after that: a
        correct one accepts any non-blank text, an incorrect one supplies the
        fallback reaction.
        """
        text = (entered_text or "").strip()
        self.entered_text = text

        if not text:
            result = BlankResult(Evaluation.NoMatch, False, text)
        else:
            result = self._classify(text)

        if result.answer is not None:
            result.answer.activate_highlights()

        self.last_result = result
        logger.info(f"Attempt '{text}' at '{self.question}': "
                    f"{result.evaluation.name}, correct={result.is_correct}")
        return result

    def _classify(self, text: str) -> BlankResult:
        answer = self._first_with(self.correct_answers, text, Evaluation.ExactMatch)
        if answer:
            return BlankResult(Evaluation.ExactMatch, True, text, answer)

        answer = self._first_with(self.incorrect_answers, text, Evaluation.ExactMatch)
        if answer:
            return BlankResult(Evaluation.ExactMatch, False, text, answer)

        answer = self._first_with(self.correct_answers, text, Evaluation.CloseMatch)
        if answer:
            return BlankResult(Evaluation.CloseMatch, True, text, answer,
                               spelling_mistake=self.settings.warn_spelling_errors)

        answer = self._first_with(self.incorrect_answers, text, Evaluation.CloseMatch)
        if answer:
            return BlankResult(Evaluation.CloseMatch, False, text, answer)

        for answer in self.correct_answers:
            if answer.applies_always:
                return BlankResult(Evaluation.ExactMatch, True, text, answer)

        for answer in self.incorrect_answers:
            if answer.applies_always:
                return BlankResult(Evaluation.NoMatch, False, text, answer)

        return BlankResult(Evaluation.NoMatch, False, text)

    def solution(self) -> str:
        for answer in self.correct_answers:
            if not answer.applies_always:
                return answer.alternatives[0]
        return ""

    def lock(self):
        self.locked = True

    def reset(self):
        self.entered_text = ""
        self.last_result = None
        self.locked = False
