from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from schemas.results import LoadResult, PlayResult

logger = logging.getLogger(__name__)


class OutputWriteError(RuntimeError):
    """The output stream failed after it was opened. Not recoverable."""


def build_status(name: str, result: LoadResult, play: Optional[PlayResult] = None) -> str:
    lines = [
        f"player: {name or '(anonymous)'}",
        f"questions loaded: {len(result.questions)}",
        f"truncated: {'yes' if result.truncated else 'no'}",
    ]
    if play is not None:
        lines.append(f"answered: {play.total}")
        lines.append(f"score: {play.correct}/{play.scored}")
        if play.duration_ms is not None:
            lines.append(f"duration_ms: {play.duration_ms}")
    return "\n".join(lines) + "\n"


def write_output(path: Union[str, Path], text: str) -> Optional[str]:
    """
    Overwrite path with text.
    Returns an error message if the file can't be opened; raises
    OutputWriteError if writing fails once it is open.
    """
    p = Path(path)
    try:
        f = p.open("w", encoding="utf-8")
    except OSError as e:
        return f"Could not open output file {p}: {e.strerror or e}"

    try:
        with f:
            f.write(text)
            f.flush()
    except OSError as e:
        raise OutputWriteError(f"Failed to write to file {p}: {e.strerror or e}") from e

    logger.debug("Wrote %d chars to %s", len(text), p)
    return None
