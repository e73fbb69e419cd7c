import pytest

_ENV_VARS = (
    "TRIVIA_QUESTIONS_PATH",
    "TRIVIA_OUTPUT_PATH",
    "TRIVIA_MAX_QUESTIONS",
    "TRIVIA_INTRO",
    "TRIVIA_APPEND_MARKER",
    "TRIVIA_MARKER",
    "TRIVIA_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def replies():
    """Build a fake input() that hands out the given lines, then EOF."""

    def make(*lines):
        it = iter(lines)

        def read(prompt=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError

        return read

    return make
