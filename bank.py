# trivia/bank.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from questions import parse_question_line
from schemas.questions import Question
from schemas.results import LoadResult

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _iter_questions(lines: Iterable[str]) -> Iterable[Question]:
    for line in lines:
        q = parse_question_line(line)
        if q is None:
            # blank line
            continue
        yield q


def load_questions(path: PathLike, max_questions: int) -> LoadResult:
    """
    Read the questions file line by line into at most max_questions entries.
    An unopenable file is reported through LoadResult.error, not raised.
    """
    if max_questions < 0:
        raise ValueError(f"max_questions must be >= 0, got {max_questions}")

    p = Path(path)
    try:
        f = p.open("r", encoding="utf-8", errors="replace")
    except OSError as e:
        return LoadResult(ok=False, error=f"Trouble opening the file {p}: {e.strerror or e}")

    questions: List[Question] = []
    truncated = False
    with f:
        for q in _iter_questions(f):
            if len(questions) >= max_questions:
                # at least one more question than we can hold
                truncated = True
                break
            questions.append(q)

    if truncated:
        logger.warning(
            "Stopped after %d questions from %s; the rest of the file was dropped.",
            max_questions,
            p,
        )
    return LoadResult(ok=True, questions=questions, truncated=truncated)


def append_completion_marker(path: PathLike, marker: str) -> Optional[str]:
    p = Path(path)
    try:
        with p.open("a", encoding="utf-8") as f:
            f.write(marker + "\n")
    except OSError as e:
        return f"Could not append marker to {p}: {e.strerror or e}"
    return None
