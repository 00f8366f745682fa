"""Chicken encoding: every byte becomes a seven-letter word.

WHY: A deliberately verbose, ASCII-only rendering of arbitrary bytes
where every bit is visible in the output: each of the low seven bits
picks the case of one letter of "CHICKEN", and the high bit adds a
trailing period.

HOW: A 256-entry token table is built once, lazily, under a lock and
then shared read-only by all encoder instances. The transform walks the
input range and copies each byte's token, followed by a space, into the
caller's buffer.

RULES:
- Bit i (0..6) set -> upper-case letter i of "CHICKEN", clear -> lower-case
- Bit 7 set -> token ends with ".", clear -> token has 7 letters
- Every token is followed by one space: 8 or 9 output bytes per input byte
- estimate_output_length(n) == 9 * n
- No state carried between calls; flush() is encode(), reset() does nothing

Example: 0x00 -> "chicken ", 0x80 -> "chicken. ", 0xFF -> "CHICKEN. "
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Optional, Tuple

from mime_encoders.core.encoding import ContentEncoding
from mime_encoders.core.errors import BufferRangeError
from mime_encoders.encoders.base import BaseEncoder

logger = logging.getLogger(__name__)

UPPER_WORD = "CHICKEN"
LOWER_WORD = UPPER_WORD.lower()
TERMINATOR = "."
SEPARATOR = ord(" ")

HIGH_BIT = 0x80
MAX_OUTPUT_PER_BYTE = len(UPPER_WORD) + len(TERMINATOR) + 1

_table: Optional[Tuple[bytes, ...]] = None
_table_lock = threading.Lock()


def grow_token(value: int) -> bytes:
    """Build the token for one byte value (without the trailing space)."""
    if not 0 <= value <= 0xFF:
        raise ValueError("byte value out of range: {}".format(value))

    letters = [
        UPPER_WORD[bit] if value & (1 << bit) else LOWER_WORD[bit]
        for bit in range(len(UPPER_WORD))
    ]
    if value & HIGH_BIT:
        letters.append(TERMINATOR)

    return "".join(letters).encode("ascii")


def build_token_table() -> Tuple[bytes, ...]:
    """Build the full 256-entry token table. Pure; same result every call."""
    return tuple(grow_token(value) for value in range(256))


def get_token_table() -> Tuple[bytes, ...]:
    """Return the shared token table, building it on first use.

    WHY: Building the table per call would waste work, and concurrent
    first callers must never see a half-built table.

    HOW: Double-checked locking. The table is only published to the
    module global once the complete tuple exists, so the unlocked fast
    path either sees None or the finished table.

    RULES:
    - Built at most once per process
    - The returned tuple is immutable and safe to share between threads
    """
    global _table

    table = _table
    if table is None:
        with _table_lock:
            if _table is None:
                _table = build_token_table()
                logger.debug("Built chicken token table (%d entries)", len(_table))
            table = _table
    return table


class ChickenEncoder(BaseEncoder):
    """Stateless encoder for the Chicken content encoding.

    Holds no per-instance data at all: every instance reads the same
    module-level token table and writes only into the caller's buffer,
    so instances can be used from any number of threads.
    """

    stateful = False

    @property
    def name(self) -> str:
        return "Chicken"

    @property
    def encoding(self) -> ContentEncoding:
        return ContentEncoding.CHICKEN

    def estimate_output_length(self, input_length: int) -> int:
        # Worst case: 7 letters + terminator + separator.
        if input_length < 0:
            raise BufferRangeError("input_length", input_length)
        return input_length * MAX_OUTPUT_PER_BYTE

    def encode(self, input: Any, start_index: int, length: int, output: Any) -> int:
        """Write the token stream for the input range into ``output``.

        Returns the number of bytes written: 8 per input byte with the
        high bit clear, 9 per input byte with it set.
        """
        source, target = self.validate_arguments(input, start_index, length, output)
        if length == 0:
            return 0

        table = get_token_table()
        pos = 0
        for value in source:
            token = table[value]
            end = pos + len(token)
            target[pos:end] = token
            target[end] = SEPARATOR
            pos = end + 1

        return pos

    def flush(self, input: Any, start_index: int, length: int, output: Any) -> int:
        # Nothing is buffered between calls, so flushing is plain encoding.
        return self.encode(input, start_index, length, output)

    def reset(self) -> None:
        pass

    def clone(self) -> "ChickenEncoder":
        return ChickenEncoder()
