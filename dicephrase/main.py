"""
Command line entry point
The passphrase is the only thing written to stdout; diagnostics go to
stderr and any failure exits with status 1
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from dicephrase import __version__
from dicephrase.config import Settings, get_settings, validate_settings
from dicephrase.errors import DicewareError
from dicephrase.logging_config import setup_logging
from dicephrase.passphrase import make_passphrase
from dicephrase.schemas import (
    EmbeddedList,
    EmbeddedSource,
    FileSource,
    GenerationRequest,
)


def build_parser() -> argparse.ArgumentParser:
    """Command line definition"""
    parser = argparse.ArgumentParser(
        prog="dicephrase",
        description="A Diceware passphrase generator",
    )
    # Kept as text so a bad value gets our own diagnostic
    parser.add_argument("words", help="The number of words to generate")

    word_list = parser.add_mutually_exclusive_group()
    word_list.add_argument(
        "-f", "--file",
        dest="word_file",
        metavar="FILE",
        help="Use a diceware word file",
    )
    word_list.add_argument(
        "--en",
        dest="embedded",
        action="store_const",
        const=EmbeddedList.EN,
        help="Use the English embedded word list",
    )
    word_list.add_argument(
        "--fr",
        dest="embedded",
        action="store_const",
        const=EmbeddedList.FR,
        help="Use the French embedded word list",
    )

    parser.add_argument(
        "-s", "--with-special-char",
        action="store_true",
        help="Add a special character to the passphrase",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_word_count(value: str) -> Optional[int]:
    """Return the word count, or None if value is not a non-negative integer"""
    try:
        count = int(value)
    except ValueError:
        return None
    if count < 0:
        return None
    return count


def build_request(args: argparse.Namespace, settings: Settings, word_count: int) -> GenerationRequest:
    """Turn parsed arguments into a generation request"""
    if args.word_file is not None:
        source = FileSource(path=args.word_file)
    else:
        source = EmbeddedSource(name=args.embedded or settings.DEFAULT_LIST)

    return GenerationRequest(
        source=source,
        word_count=word_count,
        inject_special_char=args.with_special_char,
    )


def error(message: str) -> int:
    """Print a diagnostic and return the failure exit status"""
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
        validate_settings(settings)
    except (ValidationError, ValueError) as e:
        return error(str(e))

    setup_logging(settings.LOG_LEVEL)

    word_count = parse_word_count(args.words)
    if word_count is None:
        return error(
            f"`{args.words}` is not a valid number of words. "
            "Please use an integer instead."
        )

    request = build_request(args, settings, word_count)

    try:
        passphrase = make_passphrase(request)
    except DicewareError as e:
        return error(str(e))

    print(passphrase)
    return 0


if __name__ == "__main__":
    sys.exit(main())
