from __future__ import annotations

import re
from typing import Callable, Optional

NAME_PROMPT = "What is your name? "
_INVALID_NAME_MSG = "Names may only contain the letters a-z (any case). Please try again."

# ASCII letters only; str.isalpha() would also accept accented letters
_NAME_RE = re.compile(r"[A-Za-z]*")


def is_valid_name(name: str) -> bool:
    return _NAME_RE.fullmatch(name) is not None


def prompt_for_name(
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> Optional[str]:
    """
    Ask until the reply passes is_valid_name. No retry cap.
    Returns None if input runs out before a valid name arrives.
    """
    while True:
        try:
            reply = read(NAME_PROMPT)
        except EOFError:
            return None
        name = reply.strip()
        if is_valid_name(name):
            return name
        write(_INVALID_NAME_MSG)


def compose_greeting(name: str, intro: str) -> str:
    return f"Hello {name}, {intro}"
