from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from schemas.questions import Question

# ---------- Ingestion ----------


class LoadResult(BaseModel):
    ok: bool
    questions: List[Question] = Field(default_factory=list)
    # True when lines past the cap were dropped
    truncated: bool = False
    error: Optional[str] = None


# ---------- Quiz ----------


class PlayResult(BaseModel):
    total: int
    scored: int
    correct: int
    duration_ms: Optional[int] = None
