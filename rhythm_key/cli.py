"""Command-line entry point: read, compare, parse and digest rhythm-keys."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from rhythm_key.capture.assembly import assemble_rhythm_key
from rhythm_key.capture.source import TerminalSource
from rhythm_key.codec.parser import parse_rhythm_key
from rhythm_key.config import Config
from rhythm_key.errors import RhythmKeyError
from rhythm_key.evaluation.compare import compare_rhythm_keys
from rhythm_key.evaluation.visualization import plot_rhythm_comparison
from rhythm_key.models.key import RhythmKey

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_MISMATCH = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    config = Config()
    parser = argparse.ArgumentParser(
        prog="rhythmkey",
        description="Make your password more in rhythm.",
    )
    parser.add_argument(
        "--json", dest="output_json", action="store_true",
        help="Output results as JSON.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug information to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_salt(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--salt", "--bucket-width", dest="bucket_width", type=int,
            default=config.bucket_width,
            help="Timing bucket width in ms (default: %(default)s).",
        )

    def add_rhythmkey(sub: argparse.ArgumentParser, help_text: str) -> None:
        sub.add_argument("--rhythmkey", type=str, required=True, help=help_text)

    read = subparsers.add_parser(
        "read", aliases=["r"],
        help="Read a rhythm-key from your terminal.",
    )
    read.add_argument(
        "--hash", action="store_true",
        help="Print the digest instead of the rhythm-key.",
    )
    add_salt(read)
    read.set_defaults(handler=cmd_read)

    compare = subparsers.add_parser(
        "compare", aliases=["cmp"],
        help="Read a rhythm-key from your terminal and compare it.",
    )
    add_rhythmkey(compare, "Rhythm-key to compare against.")
    add_salt(compare)
    compare.add_argument(
        "--plot", type=str, default=None,
        help="Save a timing comparison plot to this path.",
    )
    compare.set_defaults(handler=cmd_compare)

    parse = subparsers.add_parser(
        "parse", aliases=["p"],
        help="Parse a rhythm-key to test it and decompose it.",
    )
    add_rhythmkey(parse, "Rhythm-key to parse.")
    parse.set_defaults(handler=cmd_parse)

    digest = subparsers.add_parser(
        "digest", aliases=["d"],
        help="Print the digest of a stored rhythm-key.",
    )
    add_rhythmkey(digest, "Rhythm-key to digest.")
    add_salt(digest)
    digest.set_defaults(handler=cmd_digest)

    return parser.parse_args(argv)


def capture_rhythm_key(config: Config) -> RhythmKey:
    """Capture a rhythm-key from the controlling terminal."""
    print("Type your rhythm-key and press Enter:", file=sys.stderr, flush=True)
    with TerminalSource() as source:
        return assemble_rhythm_key(source, terminator=config.terminator)


def _emit(args: argparse.Namespace, payload: dict, text: str) -> None:
    if args.output_json:
        print(json.dumps(payload))
    else:
        print(text)


def cmd_read(args: argparse.Namespace, config: Config) -> int:
    rk = capture_rhythm_key(config)
    if args.hash:
        digest = rk.digest(config.bucket_width)
        _emit(args, {"digest": digest, "bucket_width": config.bucket_width}, digest)
    else:
        token = rk.encode()
        _emit(args, {"rhythmkey": token}, token)
    return EXIT_OK


def cmd_compare(args: argparse.Namespace, config: Config) -> int:
    reference = parse_rhythm_key(args.rhythmkey)
    attempt = capture_rhythm_key(config)
    result = compare_rhythm_keys(reference, attempt, config.bucket_width)

    if args.plot:
        plot_rhythm_comparison(
            reference, attempt, config.bucket_width, save_path=args.plot
        )
        logger.info("Saved comparison plot to %s", args.plot)

    verdict = "match" if result.matched else "no match"
    _emit(args, result.to_dict(), f"compare: {reference} | {attempt}\n{verdict}")
    return EXIT_OK if result.matched else EXIT_MISMATCH


def cmd_parse(args: argparse.Namespace, config: Config) -> int:
    rk = parse_rhythm_key(args.rhythmkey)
    payload = {
        "rhythmkey": rk.encode(),
        "events": [{"char": e.char, "elapsed": e.elapsed} for e in rk],
    }
    _emit(args, payload, f"rhythmkey: {rk}")
    return EXIT_OK


def cmd_digest(args: argparse.Namespace, config: Config) -> int:
    digest = parse_rhythm_key(args.rhythmkey).digest(config.bucket_width)
    _emit(args, {"digest": digest, "bucket_width": config.bucket_width}, digest)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    config = Config()
    if args.verbose:
        config.log_level = "DEBUG"
    if getattr(args, "bucket_width", None) is not None:
        config.bucket_width = args.bucket_width

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format=config.log_format,
    )

    try:
        return args.handler(args, config)
    except RhythmKeyError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
