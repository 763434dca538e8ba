import argparse
import typing as tp

from transreduce.core.config import Settings
from transreduce.core.errors import EmptySequenceError
from transreduce.functional.words import format_summary
from transreduce.logger.logger import logger


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transreduce-demo",
        description="Join words with a separator and count their characters.",
    )
    parser.add_argument(
        "words",
        nargs="*",
        help=f"Words to reduce (default: {' '.join(settings.WORDS)}).",
    )
    parser.add_argument(
        "--separator",
        default=settings.SEPARATOR,
        help=f"String placed between adjacent words (default: {settings.SEPARATOR!r}).",
    )
    return parser


def main(argv: tp.Optional[tp.Sequence[str]] = None) -> int:
    """Print the joined words and their total character count."""
    settings = Settings.load()
    logger.setLevel(settings.LOG_LEVEL)

    args = build_parser(settings).parse_args(argv)
    words = args.words or settings.WORDS
    logger.debug(f"Reducing {len(words)} words with separator {args.separator!r}")

    try:
        summary = format_summary(words, args.separator)
    except EmptySequenceError as e:
        logger.error(f"Nothing to reduce: {e}")
        return 1

    print(summary)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
