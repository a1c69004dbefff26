"""Settings: evaluation policy, exercise behaviour and config loading."""

import logging
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised at load time when authored exercise content cannot be used."""


class Settings:
    """Evaluation policy shared by every answer of one exercise."""

    def __init__(self, case_sensitive: bool = False, warn_spelling_errors: bool = True):
        self._case_sensitive = bool(case_sensitive)
        self._warn_spelling_errors = bool(warn_spelling_errors)

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    @property
    def warn_spelling_errors(self) -> bool:
        return self._warn_spelling_errors

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Settings":
        data = data or {}
        return cls(
            case_sensitive=data.get("case_sensitive", False),
            warn_spelling_errors=data.get("warn_spelling_errors", True),
        )

    def to_dict(self) -> dict:
        return {
            "case_sensitive": self.case_sensitive,
            "warn_spelling_errors": self.warn_spelling_errors,
        }

    def __repr__(self):
        return (f"Settings(case_sensitive={self.case_sensitive}, "
                f"warn_spelling_errors={self.warn_spelling_errors})")


class Behaviour:
    """Retry and solution options of an exercise."""

    def __init__(self, enable_retry: bool = True, enable_solutions_button: bool = True):
        self.enable_retry = bool(enable_retry)
        self.enable_solutions_button = bool(enable_solutions_button)

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Behaviour":
        data = data or {}
        return cls(
            enable_retry=data.get("enable_retry", True),
            enable_solutions_button=data.get("enable_solutions_button", True),
        )

    def to_dict(self) -> dict:
        return {
            "enable_retry": self.enable_retry,
            "enable_solutions_button": self.enable_solutions_button,
        }


def load_config(path: str) -> dict:
    """Load a YAML config file. A missing file yields an empty config."""
    config_path = Path(path)
    if not config_path.exists():
        logger.info(f"No config file at {config_path}; using defaults.")
        return {}
    with open(config_path) as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")
    logger.info(f"Loaded config from {config_path}")
    return config
