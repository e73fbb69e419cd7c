import argparse
import logging
import sys
from typing import Callable, List, Optional

from pydantic import ValidationError

from bank import append_completion_marker, load_questions
from config import Settings, load_settings
from names import compose_greeting, prompt_for_name
from output import OutputWriteError, build_status, write_output
from quiz import play

logger = logging.getLogger("trivia")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_WRITE_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trivia",
        description="Greet the player, load trivia questions and write a status file.",
    )
    parser.add_argument("--questions", help="Questions file, one per line")
    parser.add_argument("--output", help="Status file to (over)write")
    parser.add_argument("--max-questions", type=int, help="Keep at most this many questions")
    parser.add_argument(
        "--append-marker",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Append a completion marker to the questions file after loading",
    )
    parser.add_argument("--play", action="store_true", help="Ask the loaded questions")
    parser.add_argument("--shuffle", action="store_true", help="Shuffle questions when playing")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    return load_settings(
        questions_path=args.questions,
        output_path=args.output,
        max_questions=args.max_questions,
        append_marker=args.append_marker,
        log_level=args.log_level,
    )


def main(
    argv: Optional[List[str]] = None,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    args = build_parser().parse_args(argv)

    try:
        settings = _settings_from_args(args)
    except ValidationError as e:
        logger.error("Invalid configuration: %s", e)
        return EXIT_FAILURE
    logging.getLogger().setLevel(getattr(logging, settings.log_level))

    name = prompt_for_name(read=read, write=write)
    if name is None:
        logger.error("No name given; input ended.")
        return EXIT_FAILURE
    write(compose_greeting(name, settings.intro))

    result = load_questions(settings.questions_path, settings.max_questions)
    if not result.ok:
        logger.error(result.error)
        return EXIT_FAILURE
    logger.info("Loaded %d questions from %s", len(result.questions), settings.questions_path)

    if settings.append_marker:
        err = append_completion_marker(settings.questions_path, settings.marker)
        if err:
            logger.error(err)
            return EXIT_FAILURE

    score = None
    if args.play:
        score = play(result.questions, read=read, write=write, shuffle=args.shuffle)
        write(f"You got {score.correct} of {score.scored} scored questions right.")
        logger.info("Quiz took %d ms", score.duration_ms)

    try:
        err = write_output(settings.output_path, build_status(name, result, score))
    except OutputWriteError as e:
        logger.error(str(e))
        return EXIT_WRITE_FAILED
    if err:
        logger.error(err)
        return EXIT_FAILURE

    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
