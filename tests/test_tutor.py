"""Tests for the Tutor text-mode loop."""
import pytest
from unittest.mock import MagicMock
from reading_tutor.exercise import Exercise
from reading_tutor.feedback_generator import FeedbackGenerator
from reading_tutor.tutor import Tutor


SAMPLE_TASK = {
    "task": "Read and answer.",
    "passage": "She was born in 1**Warsaw** and studied 2**physics**.",
    "questions": [
        {"question": "Where was she born?", "targets": ["Warsaw"]},
        {"question": "What did she study?", "targets": ["physics"]},
    ],
}


@pytest.fixture
def tutor():
    tutor_obj = Tutor(exercise=Exercise(SAMPLE_TASK), feedback_generator=FeedbackGenerator())
    tutor_obj.speak = MagicMock()
    return tutor_obj


def spoken(tutor):
    return [c.args[0] for c in tutor.speak.call_args_list]


# --- Tests for handle_special_commands ---

@pytest.mark.parametrize("text,expected", [
    ("quit", "quit"),
    ("EXIT", "quit"),
    ("stop.", "quit"),
    ("skip", "skip"),
    ("Next", "skip"),
    ("repeat", "repeat"),
    ("show solution", "solution"),
    ("Warsaw", None),
])
def test_handle_special_commands(tutor, text, expected):
    assert tutor.handle_special_commands(text) == expected


# --- Tests for ask / run ---

def test_ask_repeat_then_answer(tutor):
    tutor.listen = MagicMock(side_effect=["repeat", "Warsaw"])
    assert tutor.ask(0) == "Warsaw"
    assert "Where was she born?" in spoken(tutor)


def test_ask_skip_returns_empty(tutor):
    tutor.listen = MagicMock(return_value="skip")
    assert tutor.ask(0) == ""
    tutor.speak.assert_any_call("Skipping this question.")


def test_ask_quit_returns_none(tutor):
    tutor.listen = MagicMock(return_value="quit")
    assert tutor.ask(0) is None


def test_run_all_correct(tutor):
    tutor.listen = MagicMock(side_effect=["warsaw", "physics"])
    stats = tutor.run()
    assert stats["score"] == 2
    assert stats["max_score"] == 2
    assert stats["responses"] == ["warsaw", "physics"]


def test_run_quit_early(tutor):
    tutor.listen = MagicMock(return_value="quit")
    stats = tutor.run()
    assert stats["score"] == 0
    tutor.speak.assert_any_call("Ending the exercise early. Goodbye!")


def test_run_retry_only_asks_wrong_blank(tutor):
    tutor.listen = MagicMock(side_effect=["Warsaw", "chemistry", "retry", "physics"])
    stats = tutor.run()
    assert stats["score"] == 2
    assert tutor.listen.call_count == 4


def test_run_show_solutions(tutor):
    tutor.listen = MagicMock(side_effect=["Berlin", "chemistry", "solution"])
    stats = tutor.run()
    assert stats["score"] == 0
    assert "1. Warsaw" in spoken(tutor)
    assert "2. physics" in spoken(tutor)


def test_report_renders_highlighted_passage(tutor):
    results = tutor.exercise.check(["Warsaw", "physics"])
    tutor.exercise.passage.get(2).activate()
    tutor.report(results)
    assert "She was born in Warsaw and studied [physics]." in spoken(tutor)


def test_report_spelling_notice_names_close_target():
    task = {
        "passage": "She studied 1**physics and mathematics**.",
        "questions": [{"question": "One subject?", "targets": ["physics", "mathematics"]}],
    }
    tutor_obj = Tutor(exercise=Exercise(task), feedback_generator=FeedbackGenerator())
    tutor_obj.speak = MagicMock()
    tutor_obj.report(tutor_obj.exercise.check(["mathematiks"]))
    feedback = spoken(tutor_obj)[0]
    assert "Check your spelling: mathematics" in feedback
    assert "physics" not in feedback
