"""Command line entry point for the Reading Tutor."""

import argparse
import logging

from .exercise import Exercise, load_task
from .feedback_generator import FeedbackGenerator
from .settings import Behaviour, Settings, load_config
from .tutor import Tutor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Reading comprehension tutor")
    parser.add_argument("--config", default="config.yaml", help="Config file path")
    parser.add_argument("--task", default="data/task.json", help="Task file (JSON or YAML)")
    parser.add_argument("--case-sensitive", action="store_true", default=None,
                        help="Compare answers case-sensitively")
    parser.add_argument("--no-spelling-warnings", action="store_true",
                        help="Require exact answers (no typo tolerance)")
    parser.add_argument("--no-retry", action="store_true", help="Lock answers after the first check")
    parser.add_argument("--marker", default="[{}]", help="Format used to show active highlights")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return parser


def resolve_options(args, config: dict, task: dict):
    """Merge config file, task file and command line; later sources win."""
    eval_cfg = dict(config.get("evaluation", {}))
    eval_cfg.update(task.get("evaluation") or {})
    behaviour_cfg = dict(config.get("behaviour", {}))
    behaviour_cfg.update(task.get("behaviour") or {})

    if args.case_sensitive:
        eval_cfg["case_sensitive"] = True
    if args.no_spelling_warnings:
        eval_cfg["warn_spelling_errors"] = False
    if args.no_retry:
        behaviour_cfg["enable_retry"] = False

    return Settings.from_dict(eval_cfg), Behaviour.from_dict(behaviour_cfg)


def main(argv=None):
    args = build_parser().parse_args(argv)

    # Setup logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    config = load_config(args.config)
    task = load_task(args.task)
    settings, behaviour = resolve_options(args, config, task)

    exercise = Exercise(task, settings=settings, behaviour=behaviour)
    tutor = Tutor(exercise=exercise, feedback_generator=FeedbackGenerator(highlight_marker=args.marker))
    stats = tutor.run()
    return 0 if stats["score"] == stats["max_score"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
