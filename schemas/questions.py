# trivia/schemas/questions.py
from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PlainQuestion(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["plain"] = "plain"
    prompt: str
    # None when the line carried no true/false flag
    answer: Optional[bool] = None


class MultipleChoiceQuestion(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["multiple_choice"] = "multiple_choice"
    prompt: str
    options: List[str] = Field(min_length=2)
    # index into options; None when no option was marked correct
    correct: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _correct_in_range(self) -> "MultipleChoiceQuestion":
        if self.correct is not None and self.correct >= len(self.options):
            raise ValueError(
                f"correct index {self.correct} out of range for {len(self.options)} options"
            )
        return self


Question = Annotated[
    Union[PlainQuestion, MultipleChoiceQuestion],
    Field(discriminator="kind"),
]
