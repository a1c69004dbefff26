"""Tests for the Blank module."""
import pytest
from reading_tutor.answer import Answer
from reading_tutor.blank import Blank, BlankResult
from reading_tutor.evaluation import Evaluation
from reading_tutor.highlight import Highlight
from reading_tutor.settings import ConfigurationError, Settings


@pytest.fixture
def settings():
    return Settings(case_sensitive=False, warn_spelling_errors=True)


@pytest.fixture
def highlights():
    return [Highlight(i) for i in range(1, 4)]


@pytest.fixture
def blank(settings, highlights):
    correct = [Answer("Warsaw|Warszawa", "Right;!!-1!!", settings)]
    incorrect = [
        Answer("Paris", "She moved there later;!!+1!!", settings),
        Answer("", "Look at the first sentence;!!-1!!", settings),
    ]
    b = Blank("Where was she born?", correct, incorrect, settings)
    b.link_highlights(highlights[:1], highlights[1:])
    return b


def test_exact_correct(blank, highlights):
    result = blank.evaluate_attempt("warsaw")
    assert result.evaluation == Evaluation.ExactMatch
    assert result.is_correct is True
    assert result.message == "Right"
    assert highlights[0].is_active()
    assert blank.is_correct


def test_entered_text_is_trimmed(blank):
    assert blank.evaluate_attempt("  Warszawa ").evaluation == Evaluation.ExactMatch
    assert blank.entered_text == "Warszawa"


def test_close_correct_flags_spelling(blank):
    result = blank.evaluate_attempt("Warsav")
    assert result.evaluation == Evaluation.CloseMatch
    assert result.is_correct is True
    assert result.spelling_mistake is True


def test_exact_incorrect_activates_its_highlight(blank, highlights):
    result = blank.evaluate_attempt("Paris")
    assert result.evaluation == Evaluation.ExactMatch
    assert result.is_correct is False
    assert result.message == "She moved there later"
    assert [h.id for h in highlights if h.is_active()] == [2]


def test_exact_incorrect_beats_close_correct(settings):
    correct = [Answer("cats", "", settings)]
    incorrect = [Answer("cat", "Plural please", settings)]
    blank = Blank("?", correct, incorrect, settings)
    result = blank.evaluate_attempt("cat")
    assert result.is_correct is False
    assert result.message == "Plural please"


def test_applies_always_fallback(blank):
    result = blank.evaluate_attempt("Berlin")
    assert result.evaluation == Evaluation.NoMatch
    assert result.is_correct is False
    assert result.message == "Look at the first sentence"
    assert result.highlights


def test_blank_input_gets_no_reaction(blank, highlights):
    result = blank.evaluate_attempt("   ")
    assert result.evaluation == Evaluation.NoMatch
    assert result.answer is None
    assert result.message == ""
    assert not any(h.is_active() for h in highlights)


def test_no_match_without_fallback(settings):
    blank = Blank("?", [Answer("yes", "", settings)], [], settings)
    result = blank.evaluate_attempt("absolutely not")
    assert result.evaluation == Evaluation.NoMatch
    assert result.answer is None


def test_correct_answer_applying_always_accepts_any_text(settings):
    blank = Blank("Your opinion?", [Answer("", "Thanks", settings)], [], settings)
    assert blank.evaluate_attempt("anything").is_correct is True
    assert blank.evaluate_attempt("").is_correct is False
    assert blank.solution() == ""


def test_requires_correct_answer(settings):
    with pytest.raises(ConfigurationError):
        Blank("?", [], [Answer("x", "", settings)], settings)


def test_solution_is_first_alternative(blank):
    assert blank.solution() == "Warsaw"


def test_lock_and_reset(blank):
    blank.evaluate_attempt("Warsaw")
    blank.lock()
    assert blank.locked
    blank.reset()
    assert blank.locked is False
    assert blank.last_result is None
    assert blank.evaluation == Evaluation.NoMatch


def test_result_to_dict(blank):
    d = blank.evaluate_attempt("Paris").to_dict()
    assert d["evaluation"] == "ExactMatch"
    assert d["is_correct"] is False
    assert d["highlights"] == [2]
    assert set(d) == {"evaluation", "is_correct", "entered_text", "spelling_mistake",
                      "matched_alternative", "message", "highlights"}


def test_spelling_flag_off_without_warnings():
    settings = Settings(warn_spelling_errors=False)
    blank = Blank("?", [Answer("Warsaw", "", settings)], [], settings)
    result = blank.evaluate_attempt("Warsav")
    assert isinstance(result, BlankResult)
    assert result.evaluation == Evaluation.NoMatch
    assert result.spelling_mistake is False


def test_spelling_mistake_names_nearly_typed_target(settings):
    correct = [Answer("physics", "", settings), Answer("mathematics", "", settings)]
    blank = Blank("What did she study?", correct, [], settings)
    result = blank.evaluate_attempt("mathematiks")
    assert result.evaluation == Evaluation.CloseMatch
    assert result.spelling_mistake is True
    assert result.matched_alternative == "mathematics"


def test_matched_alternative_is_closest_within_answer(settings):
    blank = Blank("?", [Answer("colour|color", "", settings)], [], settings)
    assert blank.evaluate_attempt("colr").matched_alternative == "color"
    assert blank.evaluate_attempt("COLOUR").matched_alternative == "colour"


def test_no_matched_alternative_for_fallback(blank):
    assert blank.evaluate_attempt("Berlin").matched_alternative is None
