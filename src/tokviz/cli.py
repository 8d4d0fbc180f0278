"""Command line front end for encoding, decoding and browsing the vocabulary."""

import argparse
import logging
import os
import sys
from typing import Final

from ._sanitise import render_unit
from .errors import InvalidTokenInputError
from .factory import get_tokenizer
from .parse import parse_tokens
from .samples import SAMPLE_TEXTS, get_sample
from .types import TraceStep

LOG_LEVEL_ENV: Final[str] = "TOKVIZ_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

log = logging.getLogger(__name__)


def _print_steps(steps: list[TraceStep]) -> None:
    for step in steps:
        if isinstance(step.input, str):
            shown_input = render_unit(step.input)
        else:
            shown_input = str(step.input)
        if isinstance(step.output, list):
            shown_output = ", ".join(map(str, step.output))
        elif isinstance(step.output, str):
            shown_output = render_unit(step.output)
        else:
            shown_output = str(step.output)
        print(f"{step.step:>4}  {shown_input:<16} -> {shown_output:<24} {step.process}")


def _cmd_encode(args: argparse.Namespace) -> int:
    if not args.text.strip():
        print("error: no text to encode", file=sys.stderr)
        return 2

    result = get_tokenizer().encode(args.text)
    print(", ".join(map(str, result.tokens)))
    print(f"Characters: {result.char_count}, Tokens: {result.token_count}")
    if args.steps:
        _print_steps(result.steps)
    return 0


def _cmd_decode(args: argparse.Namespace) -> int:
    try:
        tokens = parse_tokens(args.tokens)
    except InvalidTokenInputError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    result = get_tokenizer().decode(tokens)
    print(result.text)
    if args.steps:
        _print_steps(result.steps)
    return 0


def _cmd_stats(args: argparse.Namespace) -> int:
    tokenizer = get_tokenizer()
    stats = tokenizer.stats(args.text)
    print(
        f"Characters: {stats.char_count}, Tokens: {stats.token_count}, "
        f"Compression: {stats.compression_ratio}%"
    )
    # token grid: id and the text it stands for
    grid = [f"{tok}:{render_unit(tokenizer.token_text(tok))}" for tok in stats.tokens]
    if grid:
        print(" ".join(grid))
    return 0


def _cmd_vocab(args: argparse.Namespace) -> int:
    entries = get_tokenizer().vocab.list_entries(args.search, args.ascii)
    if not entries:
        print("No vocabulary entries found", file=sys.stderr)
        return 1
    for entry in entries:
        print(f"{entry.id}\t{render_unit(entry.unit)}\t{entry.kind}")
    return 0


def _cmd_samples(args: argparse.Namespace) -> int:
    if args.index is not None:
        try:
            print(get_sample(args.index))
        except IndexError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        return 0
    for i, text in enumerate(SAMPLE_TEXTS):
        print(f"{i}: {text}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per operation."""
    parser = argparse.ArgumentParser(
        prog="tokviz",
        description="Encode text to vocabulary token ids and back.",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL}).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_encode = sub.add_parser("encode", help="Encode text into token ids.")
    p_encode.add_argument("text", help="Text to encode.")
    p_encode.add_argument(
        "--steps", action="store_true", help="Print the per-unit trace."
    )
    p_encode.set_defaults(func=_cmd_encode)

    p_decode = sub.add_parser("decode", help="Decode comma-separated token ids.")
    p_decode.add_argument("tokens", help='Token ids, e.g. "10, 2099, 2097, 2116".')
    p_decode.add_argument(
        "--steps", action="store_true", help="Print the per-token trace."
    )
    p_decode.set_defaults(func=_cmd_decode)

    p_stats = sub.add_parser("stats", help="Show counts and compression ratio.")
    p_stats.add_argument("text", help="Text to measure.")
    p_stats.set_defaults(func=_cmd_stats)

    p_vocab = sub.add_parser("vocab", help="List vocabulary entries.")
    p_vocab.add_argument(
        "--search", default="", help="Only list entries containing this term."
    )
    p_vocab.add_argument(
        "--ascii",
        action="store_true",
        help="Include the printable ASCII fallback range.",
    )
    p_vocab.set_defaults(func=_cmd_vocab)

    p_samples = sub.add_parser("samples", help="Print built-in sample texts.")
    p_samples.add_argument(
        "--index", type=int, default=None, help="Print only this sample."
    )
    p_samples.set_defaults(func=_cmd_samples)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = args.log_level.upper()
    if level not in logging.getLevelNamesMapping():
        # exits with status 2
        parser.error(f"unknown log level: {args.log_level!r}")

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    log.debug(f"running command {args.command!r}")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
