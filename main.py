#!/usr/bin/env python3
"""Demo entry point for the Reading Tutor."""

from reading_tutor.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
