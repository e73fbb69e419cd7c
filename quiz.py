from __future__ import annotations

import random
import time
from typing import Callable, List, Optional, Sequence

from questions import check_answer, render_question
from schemas.questions import Question
from schemas.results import PlayResult

ANSWER_PROMPT = "> "


def play(
    questions: Sequence[Question],
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    shuffle: bool = False,
    rng: Optional[random.Random] = None,
) -> PlayResult:
    """
    Ask each question once and tally the scored ones.
    Running out of input ends the quiz with whatever was answered so far.
    """
    t0 = time.perf_counter()

    # copy so shuffling never reorders the caller's collection
    order: List[Question] = list(questions)
    if shuffle:
        (rng or random.Random()).shuffle(order)

    total = scored = correct = 0
    for n, q in enumerate(order, 1):
        write(render_question(q, n))
        try:
            reply = read(ANSWER_PROMPT)
        except EOFError:
            break
        total += 1

        verdict = check_answer(q, reply)
        if verdict is None:
            continue
        scored += 1
        if verdict:
            correct += 1
            write("Correct!")
        else:
            write("Not quite.")

    duration_ms = int(round((time.perf_counter() - t0) * 1000))
    return PlayResult(total=total, scored=scored, correct=correct, duration_ms=duration_ms)
