"""Tutor: text-mode loop that runs an exercise with the learner."""

import logging
from typing import List, Optional

from .exercise import SHOW_SOLUTION, TRY_AGAIN

logger = logging.getLogger(__name__)


class Tutor:
    """
    Runs an exercise on the console: shows the task and passage, asks every
    question, checks the answers, and offers retries and solutions.
    """

    def __init__(self, exercise, feedback_generator):
        self.exercise = exercise
        self.feedback = feedback_generator
        self._running = False

    def speak(self, text: str):
        print(f"\n[Tutor]: {text}")

    def listen(self) -> str:
        try:
            return input("\n[You]: ").strip()
        except (EOFError, KeyboardInterrupt):
            return "quit"

    def handle_special_commands(self, text: str) -> Optional[str]:
        """Recognise 'skip', 'quit', 'repeat' and 'solution' commands."""
        lower = text.lower().strip().rstrip(".!?")
        if lower in ("quit", "exit", "stop"):
            return "quit"
        if lower in ("skip", "next", "pass"):
            return "skip"
        if lower in ("repeat", "say again"):
            return "repeat"
        if lower in ("solution", "show solution", "solutions"):
            return "solution"
        return None

    def ask(self, index: int) -> Optional[str]:
        """Ask one question. Returns the answer, "" when skipped, None to quit."""
        blank = self.exercise.blanks[index]
        total = self.exercise.get_max_score()
        self.speak(self.feedback.generate_intro(blank.question, index + 1, total))

        while True:
            answer = self.listen()
            command = self.handle_special_commands(answer)
            if command == "quit":
                return None
            if command == "skip":
                self.speak("Skipping this question.")
                return ""
            if command == "repeat":
                self.speak(blank.question)
                continue
            if command == "solution":
                self.speak("Solutions are shown after checking your answers.")
                continue
            return answer

    def run_round(self) -> Optional[List[str]]:
        """Collect responses for every unlocked blank. None means quit."""
        responses = []
        for i, blank in enumerate(self.exercise.blanks):
            if blank.locked:
                responses.append(blank.entered_text)
                continue
            answer = self.ask(i)
            if answer is None:
                return None
            responses.append(answer)
        return responses

    def report(self, results):
        for i, result in enumerate(results):
            blank = self.exercise.blanks[i]
            solution = result.matched_alternative or blank.solution()
            text = self.feedback.generate(result, solution=solution)
            self.speak(f"{i + 1}. {text} {self.feedback.generate_result_line(result)}")
        self.speak(self.feedback.render_passage(self.exercise.passage))
        self.speak(self.feedback.generate_session_summary(
            self.exercise.get_score(), self.exercise.get_max_score()))

    def offer_next_step(self) -> bool:
        """Ask whether to retry or show solutions. Returns True to go again."""
        buttons = self.exercise.buttons()
        options = []
        if buttons.get(TRY_AGAIN):
            options.append("'retry'")
        if buttons.get(SHOW_SOLUTION):
            options.append("'solution'")
        if not options:
            return False

        self.speak(f"Type {' or '.join(options)}, or anything else to finish.")
        choice = self.listen().lower().strip()
        if choice == "retry" and buttons.get(TRY_AGAIN):
            self.exercise.reset_task()
            return True
        if self.handle_special_commands(choice) == "solution" and buttons.get(SHOW_SOLUTION):
            for i, solution in enumerate(self.exercise.show_solutions()):
                self.speak(f"{i + 1}. {solution}")
        return False

    def run(self) -> dict:
        """Run the exercise until it is passed, finished or quit."""
        self._running = True
        self.speak(self.exercise.task)
        self.speak(self.exercise.passage.plain_text())

        while self._running:
            responses = self.run_round()
            if responses is None:
                self.speak("Ending the exercise early. Goodbye!")
                break
            results = self.exercise.check(responses)
            self.report(results)
            if self.exercise.is_passed() or not self.offer_next_step():
                break

        self._running = False
        stats = {
            "score": self.exercise.get_score(),
            "max_score": self.exercise.get_max_score(),
            "responses": self.exercise.responses(),
        }
        logger.info(f"Exercise finished: {stats}")
        return stats
