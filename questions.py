# Question line format, one question per line:
#   What is the capital of France?                 -> plain, unscored
#   The sun is a star | true                       -> plain, with answer flag
#   Largest planet? | Mars | *Jupiter | Venus      -> multiple choice, * marks the answer
from __future__ import annotations

from typing import List, Optional

from schemas.questions import MultipleChoiceQuestion, PlainQuestion, Question

FIELD_SEP = "|"
CORRECT_MARK = "*"

_FLAG_VALUES = {"true": True, "false": False}
_YES = {"true", "t", "yes", "y"}
_NO = {"false", "f", "no", "n"}


def parse_question_line(line: str) -> Optional[Question]:
    """
    Turn one line of the questions file into a Question.
    Returns None only for blank lines; anything else yields a question,
    falling back to a plain prompt when the fields don't form a valid variant.
    """
    s = line.strip()
    if not s:
        return None

    parts = [p.strip() for p in s.split(FIELD_SEP)]
    prompt, rest = parts[0], parts[1:]
    if not rest:
        return PlainQuestion(prompt=s)

    if len(rest) == 1 and rest[0].lower() in _FLAG_VALUES:
        return PlainQuestion(prompt=prompt, answer=_FLAG_VALUES[rest[0].lower()])

    options: List[str] = []
    correct: Optional[int] = None
    for raw in rest:
        marked = raw.startswith(CORRECT_MARK)
        text = raw[len(CORRECT_MARK):].strip() if marked else raw
        if not text:
            continue
        if marked and correct is None:
            correct = len(options)
        options.append(text)

    if len(options) < 2:
        return PlainQuestion(prompt=s)
    return MultipleChoiceQuestion(prompt=prompt, options=options, correct=correct)


def render_question(q: Question, number: Optional[int] = None) -> str:
    head = f"{number}. {q.prompt}" if number is not None else q.prompt
    match q:
        case PlainQuestion(answer=None):
            return head
        case PlainQuestion():
            return f"{head} (true/false)"
        case MultipleChoiceQuestion(options=options):
            lines = [head] + [f"  {i}) {opt}" for i, opt in enumerate(options, 1)]
            return "\n".join(lines)
    raise TypeError(f"unknown question type: {type(q).__name__}")


def check_answer(q: Question, reply: str) -> Optional[bool]:
    """
    True/False for scored questions, None when the question has no answer key.
    Unrecognised replies count as wrong.
    """
    r = reply.strip().lower()
    match q:
        case PlainQuestion(answer=None) | MultipleChoiceQuestion(correct=None):
            return None
        case PlainQuestion(answer=expected):
            if r in _YES:
                return expected is True
            if r in _NO:
                return expected is False
            return False
        case MultipleChoiceQuestion(options=options, correct=idx):
            if r == options[idx].lower():
                return True
            # option numbers never need more digits than the option count has
            if r.isdecimal() and len(r) <= len(str(len(options))):
                return int(r) - 1 == idx
            return False
    raise TypeError(f"unknown question type: {type(q).__name__}")
