"""Feedback Generator: feedback text for blank results and exercise summaries."""

import logging
import random

from .evaluation import Evaluation

logger = logging.getLogger(__name__)

CORRECT_TEMPLATES = [
    "Correct! {reinforcement}",
    "Well done! {reinforcement}",
    "That's right. {reinforcement}",
]

INCORRECT_TEMPLATES = [
    "Not quite.",
    "That's not right.",
    "Have another look at the text.",
]

REINFORCEMENTS = [
    "Keep it up!",
    "Good reading!",
    "You found it in the text.",
]

SPELLING_NOTICE = "Check your spelling: {solution}"
EMPTY_NOTICE = "Please enter an answer."
CONTEXT_NOTICE = "Look at the highlighted part of the passage."


class FeedbackGenerator:
    """Turns blank results into feedback lines for the learner."""

    def __init__(self, highlight_marker: str = "[{}]"):
        self.highlight_marker = highlight_marker

    def generate(self, result, solution: str = "") -> str:
        """Feedback text for a single ``BlankResult``.

        The author's reaction text is used when there is one; otherwise a
        default template for the verdict.
        """
        if not result.entered_text:
            return EMPTY_NOTICE

        parts = []
        if result.message:
            parts.append(result.message)
        elif result.is_correct:
            template = random.choice(CORRECT_TEMPLATES)
            parts.append(template.format(reinforcement=random.choice(REINFORCEMENTS)).strip())
        else:
            parts.append(random.choice(INCORRECT_TEMPLATES))

        if result.spelling_mistake and solution:
            parts.append(SPELLING_NOTICE.format(solution=solution))
        if result.highlights:
            parts.append(CONTEXT_NOTICE)
        return " ".join(parts)

    def generate_intro(self, question: str, question_num: int, total: int) -> str:
        return f"Question {question_num} of {total}. {question}"

    def render_passage(self, passage) -> str:
        return passage.render(self.highlight_marker)

    def generate_result_line(self, result) -> str:
        verdict = "correct" if result.is_correct else "incorrect"
        line = f"[{result.evaluation.name} | {verdict}]"
        if result.evaluation == Evaluation.CloseMatch and result.is_correct:
            line += " (accepted with minor spelling differences)"
        return line

    def generate_session_summary(self, score: int, max_score: int) -> str:
        pct = (score / max_score * 100) if max_score > 0 else 0
        summary = f"You got {score} out of {max_score} points. "
        if pct >= 100:
            summary += "Perfect!"
        elif pct >= 60:
            summary += "Good work! Try again to get the rest."
        else:
            summary += "Read the passage again and retry."
        logger.debug(f"Summary generated for score {score}/{max_score}")
        return summary
