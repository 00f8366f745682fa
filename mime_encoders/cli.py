"""Command-line interface for MIME Encoders.

WHY: Users need a quick way to push a file (or a pipe) through any
registered content transfer encoding and to see which encodings exist,
without writing Python.

HOW: argparse accepts an input path (or "-" for stdin), an output path
(or "-" for stdout), the encoding name and the chunk size. The input is
streamed through encode_stream() so large files never sit in memory.
--list-encodings prints the registry as JSON.

RULES:
- Encoded data goes to stdout (or --output); status goes to stderr
- Defaults come from mime_encoders.config (.env / environment)
- Argument, config and encoder errors print "Error: ..." and exit 1
- -v prints a one-line summary and enables DEBUG logging
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from contextlib import ExitStack
from typing import Any, BinaryIO, Dict, List, Optional

from mime_encoders.config import (
    DEFAULT_CHUNK_SIZE_RAW,
    DEFAULT_ENCODING,
    LOG_FORMAT,
    load_chunk_size,
    load_log_level,
)
from mime_encoders.core.errors import EncoderArgumentError
from mime_encoders.core.pipeline import encode_stream
from mime_encoders.encoders import ENCODERS, create_encoder

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr, keeping stdout clean for data."""
    print(msg, file=sys.stderr, flush=True)


def describe_encoders() -> List[Dict[str, Any]]:
    """Describe every registered encoder for --list-encodings.

    Each entry has the encoder's name, its encoding token, whether it is
    stateful, and the worst-case output bytes per input byte.
    """
    entries: List[Dict[str, Any]] = []
    for encoding in sorted(ENCODERS, key=lambda e: e.value):
        encoder = ENCODERS[encoding]()
        entries.append({
            "name": encoder.name,
            "encoding": encoding.value,
            "stateful": encoder.stateful,
            "max_output_per_byte": encoder.estimate_output_length(1),
        })
    return entries


def _open_input(path: str, stack: ExitStack) -> BinaryIO:
    if path == "-":
        return sys.stdin.buffer
    return stack.enter_context(open(path, "rb"))


def _open_output(path: str, stack: ExitStack) -> BinaryIO:
    if path == "-":
        return sys.stdout.buffer
    return stack.enter_context(open(path, "wb"))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="mime_encoders",
        description="Encode a file with a MIME content transfer encoding "
                    "(chicken, 7bit, 8bit, binary, default).",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default="-",
        help="File to encode, or '-' for stdin (default: %(default)s).",
    )

    parser.add_argument(
        "-o", "--output",
        default="-",
        help="Where to write the encoded data, or '-' for stdout (default: %(default)s).",
    )

    parser.add_argument(
        "-e", "--encoding",
        default=DEFAULT_ENCODING,
        help="Content transfer encoding to apply (default: %(default)s). "
             "Available: {}.".format(", ".join(sorted(e.value for e in ENCODERS))),
    )

    parser.add_argument(
        "--chunk-size",
        default=DEFAULT_CHUNK_SIZE_RAW,
        help="Input bytes per encoder call (default: %(default)s).",
    )

    parser.add_argument(
        "--list-encodings",
        action="store_true",
        help="Print the registered encoders as JSON and exit.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print a summary to stderr and enable debug logging.",
    )

    return parser


def run(args: argparse.Namespace) -> int:
    """Run the CLI for parsed arguments and return the exit code."""
    if args.list_encodings:
        print(json.dumps(describe_encoders(), indent=2))
        return 0

    try:
        chunk_size = load_chunk_size(args.chunk_size)
        encoder = create_encoder(args.encoding)
    except ValueError as exc:  # includes UnsupportedEncodingError
        _status("Error: {}".format(exc))
        return 1

    try:
        with ExitStack() as stack:
            source = _open_input(args.input_file, stack)
            sink = _open_output(args.output, stack)
            stats = encode_stream(source, sink, encoder, chunk_size)
            sink.flush()
    except OSError as exc:
        logger.error("I/O failure while encoding %s: %s", args.input_file, exc)
        _status("Error: {}".format(exc))
        return 1
    except EncoderArgumentError as exc:
        logger.exception("Encoder rejected its arguments")
        _status("Error: {}".format(exc))
        return 1

    if args.verbose:
        _status("Encoded {} bytes -> {} bytes ({})".format(
            stats.bytes_in, stats.bytes_out, encoder.encoding.value,
        ))
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m mime_encoders`` and the console script.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = load_log_level()
    except ValueError as exc:
        _status("Error: {}".format(exc))
        sys.exit(1)
    if args.verbose:
        level = logging.DEBUG

    logging.basicConfig(level=level, format=LOG_FORMAT)

    sys.exit(run(args))


if __name__ == "__main__":
    main()
