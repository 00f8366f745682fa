"""Identity encoders for 7bit, 8bit, binary and unspecified content.

WHY: Parts that already are in their transfer form still flow through
the same encoder pipeline as everything else. A copying encoder lets
the pipeline treat them uniformly instead of special-casing them.

HOW: Validates the range like every other encoder, then copies the
input bytes verbatim into the output buffer.

RULES:
- Only DEFAULT, SEVEN_BIT, EIGHT_BIT and BINARY are accepted
- estimate_output_length(n) == n
- Stateless: flush() is encode(), reset() does nothing
"""

from __future__ import annotations

from typing import Any

from mime_encoders.core.encoding import ContentEncoding
from mime_encoders.core.errors import BufferRangeError, UnsupportedEncodingError
from mime_encoders.encoders.base import BaseEncoder

PASSTHROUGH_ENCODINGS = frozenset({
    ContentEncoding.DEFAULT,
    ContentEncoding.SEVEN_BIT,
    ContentEncoding.EIGHT_BIT,
    ContentEncoding.BINARY,
})


class PassThroughEncoder(BaseEncoder):
    """Copies input to output unchanged, tagged with the given encoding."""

    stateful = False

    def __init__(self, encoding: ContentEncoding = ContentEncoding.DEFAULT) -> None:
        encoding = ContentEncoding.parse(encoding)
        if encoding not in PASSTHROUGH_ENCODINGS:
            raise UnsupportedEncodingError(
                "{} is not a pass-through encoding".format(encoding.value)
            )
        self._encoding = encoding

    @property
    def name(self) -> str:
        return "Pass-through ({})".format(self._encoding.value)

    @property
    def encoding(self) -> ContentEncoding:
        return self._encoding

    def estimate_output_length(self, input_length: int) -> int:
        if input_length < 0:
            raise BufferRangeError("input_length", input_length)
        return input_length

    def encode(self, input: Any, start_index: int, length: int, output: Any) -> int:
        source, target = self.validate_arguments(input, start_index, length, output)
        target[:length] = source
        return length

    def flush(self, input: Any, start_index: int, length: int, output: Any) -> int:
        return self.encode(input, start_index, length, output)

    def reset(self) -> None:
        pass

    def clone(self) -> "PassThroughEncoder":
        return PassThroughEncoder(self._encoding)
