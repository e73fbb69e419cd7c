from __future__ import annotations

import os
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_QUESTIONS_PATH = "triviaquestions.txt"
DEFAULT_OUTPUT_PATH = "output.txt"
DEFAULT_MAX_QUESTIONS = 50
DEFAULT_INTRO = "Welcome to the Trivia Game"

_TRUTHY = {"1", "true", "yes", "on"}

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    """
    Process-wide settings, built once at startup and passed down explicitly.
    Frozen so nothing downstream can mutate e.g. the intro text.
    """

    model_config = ConfigDict(frozen=True)

    questions_path: str = DEFAULT_QUESTIONS_PATH
    output_path: str = DEFAULT_OUTPUT_PATH
    max_questions: int = Field(default=DEFAULT_MAX_QUESTIONS, ge=0)
    intro: str = DEFAULT_INTRO
    append_marker: bool = False
    marker: str = "# done"
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return v.strip().upper() if isinstance(v, str) else v


def _env_flag(name: str) -> Optional[bool]:
    raw = os.getenv(name)
    if raw is None:
        return None
    return raw.strip().lower() in _TRUTHY


def load_settings(**overrides: Any) -> Settings:
    """
    Env vars first, then explicit overrides (CLI flags). None means "not given".
    Raises pydantic.ValidationError on bad values such as a non-integer max.
    """
    values: Dict[str, Any] = {
        "questions_path": os.getenv("TRIVIA_QUESTIONS_PATH"),
        "output_path": os.getenv("TRIVIA_OUTPUT_PATH"),
        "max_questions": os.getenv("TRIVIA_MAX_QUESTIONS"),
        "intro": os.getenv("TRIVIA_INTRO"),
        "append_marker": _env_flag("TRIVIA_APPEND_MARKER"),
        "marker": os.getenv("TRIVIA_MARKER"),
        "log_level": os.getenv("TRIVIA_LOG_LEVEL"),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**{k: v for k, v in values.items() if v is not None})
