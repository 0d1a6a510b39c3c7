import argparse
import logging
import sys
import time
from typing import Iterable, List, Optional

from textkit.core.case_joining.config import STYLE_POLICIES
from textkit.core.padding.config import PadPosition
from textkit.messages.cli_messages import COMMAND_DONE, COMMAND_FAILED, NO_INPUT
from textkit.transforms import (
    convert_case,
    pad,
    pad_end,
    pad_start,
    split_ex,
    split_words,
    word_count,
)
from textkit.utils.exceptions import TextKitError
from textkit.utils.logging import setup_logging

logger = logging.getLogger(__name__)

_PADDERS = {
    PadPosition.BOTH: pad,
    PadPosition.START: pad_start,
    PadPosition.END: pad_end,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textkit", description="Case conversion, word splitting and padding."
    )
    parser.add_argument(
        "--log-level", type=str, default=None, help="Override TEXTKIT_LOG_LEVEL"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    case = sub.add_parser("case", help="Convert text to a case style")
    case.add_argument(
        "style", type=str, help="One of: " + ", ".join(sorted(STYLE_POLICIES))
    )
    case.add_argument("text", nargs="*", help="Input text (stdin if omitted)")

    words = sub.add_parser("words", help="List natural-language words")
    words.add_argument("text", nargs="*", help="Input text (stdin if omitted)")
    words.add_argument("--count", action="store_true", help="Print counts only")

    padp = sub.add_parser("pad", help="Pad text to a fixed size")
    padp.add_argument("text", type=str)
    padp.add_argument("--size", type=int, required=True)
    padp.add_argument("--pattern", type=str, default=" ")
    padp.add_argument(
        "--position",
        type=str,
        default=PadPosition.BOTH.value,
        choices=[p.value for p in PadPosition],
    )

    split = sub.add_parser("split", help="Split text on a literal separator")
    split.add_argument("text", type=str)
    split.add_argument("--sep", type=str, required=True)
    split.add_argument("--remove-empty", action="store_true")

    return parser


def _input_lines(texts: List[str]) -> Iterable[str]:
    if texts:
        return texts
    if sys.stdin.isatty():
        raise TextKitError(code="NO_INPUT", message=NO_INPUT)
    return (line.rstrip("\n") for line in sys.stdin)


def _run(args: argparse.Namespace) -> List[str]:
    if args.command == "case":
        return [convert_case(t, args.style) for t in _input_lines(args.text)]
    if args.command == "words":
        out: List[str] = []
        for t in _input_lines(args.text):
            if args.count:
                out.append(str(word_count(t)))
            else:
                out.extend(split_words(t))
        return out
    if args.command == "pad":
        padder = _PADDERS[PadPosition.coerce(args.position)]
        return [padder(args.text, args.size, args.pattern)]
    return split_ex(args.text, args.sep, args.remove_empty)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    start = time.time()
    try:
        # stdout carries results, so logs go to stderr
        setup_logging(args.log_level, stream=sys.stderr)
        lines = _run(args)
    except TextKitError as e:
        logger.error(COMMAND_FAILED.format(command=args.command, error=e.message))
        print(e.message, file=sys.stderr)
        return 2

    for line in lines:
        print(line)
    logger.debug(COMMAND_DONE.format(command=args.command, elapsed=time.time() - start))
    return 0


if __name__ == "__main__":
    sys.exit(main())
