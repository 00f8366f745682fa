"""Abstract base encoder shared by every content transfer encoding.

WHY: The pipeline chains encoders with line wrapping, I/O and header
glue, and must be able to swap one scheme for another without special
cases. This base class fixes the capability surface every scheme offers.

HOW: BaseEncoder is an ABC. Subclasses implement the identity (name,
encoding), the capacity estimate, and the encode/flush/reset/clone
operations. The shared validate_arguments() performs the buffer
contract checks in a fixed order and hands back memoryviews, so no
subclass writes before the whole call has been validated.

RULES:
- Callers size the output with estimate_output_length() before encoding
- encode() and flush() never write past estimate_output_length(length)
- Validation happens before the first write; failed calls write nothing
- Stateless schemes set ``stateful = False``; their flush() is encode()
- clone() returns an independent instance with identical future behaviour

To add a new encoding:
1. Create a new module in encoders/
2. Subclass BaseEncoder and implement the abstract members
3. Register a factory in ENCODERS in encoders/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Tuple

from mime_encoders.core.encoding import ContentEncoding
from mime_encoders.core.errors import (
    BufferRangeError,
    MissingBufferError,
    OutputTooSmallError,
)


def byte_view(buffer: Any, argument: str, writable: bool = False) -> memoryview:
    """Return a flat byte-wise memoryview of ``buffer``.

    WHY: Callers may hand in any bytes-like object, including strided or
    multi-byte-item memoryviews. Encoders index bytes one at a time, so
    they need a contiguous "B" view.

    RULES:
    - Non-buffer objects raise MissingBufferError
    - A non-contiguous input is copied into a contiguous one
    - An output must be contiguous and writable, since writes land in place
    """
    try:
        view = memoryview(buffer)
    except TypeError:
        raise MissingBufferError(argument, "is not a bytes-like buffer") from None

    if writable:
        if view.readonly:
            raise MissingBufferError(argument, "is not a writable buffer")
        if not view.c_contiguous:
            raise MissingBufferError(argument, "is not a contiguous buffer")
    elif not view.c_contiguous:
        view = memoryview(view.tobytes())

    return view.cast("B")


class BaseEncoder(ABC):
    """Abstract base for all content transfer encoders."""

    stateful: bool = False
    """True when the encoder carries input across calls and flush() matters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable scheme name, e.g. 'Chicken'."""

    @property
    @abstractmethod
    def encoding(self) -> ContentEncoding:
        """The ContentEncoding this encoder implements, for scheme dispatch."""

    @abstractmethod
    def estimate_output_length(self, input_length: int) -> int:
        """Return the number of output bytes needed to encode ``input_length`` bytes.

        The value is an upper bound: encode() and flush() never write more.
        """

    @abstractmethod
    def encode(self, input: Any, start_index: int, length: int, output: Any) -> int:
        """Encode ``input[start_index:start_index + length]`` into ``output``.

        Args:
            input: Any bytes-like object.
            start_index: Offset of the first input byte to encode.
            length: Number of input bytes to encode.
            output: A writable bytes-like object with room for
                    estimate_output_length(length) bytes.

        Returns:
            The number of bytes written to the start of ``output``.
        """

    @abstractmethod
    def flush(self, input: Any, start_index: int, length: int, output: Any) -> int:
        """Encode the final input range and emit any state held by the encoder."""

    @abstractmethod
    def reset(self) -> None:
        """Discard any state carried between calls."""

    @abstractmethod
    def clone(self) -> "BaseEncoder":
        """Return a new encoder with the same configuration and state."""

    def validate_arguments(
        self,
        input: Any,
        start_index: int,
        length: int,
        output: Any,
    ) -> Tuple[memoryview, memoryview]:
        """Check the buffer contract and return (input range view, output view).

        WHY: Every encoder shares the same all-or-nothing contract. Doing
        the checks in one place keeps the order and the error types
        consistent across schemes.

        HOW: Checks, in order: input present, start_index inside input,
        length fits after start_index, output present and writable,
        output capacity >= estimate_output_length(length).

        RULES:
        - Raises MissingBufferError, BufferRangeError or OutputTooSmallError
        - Never touches the output contents
        - Views are byte-wise ("B" format) regardless of the caller's buffer type
        - Strided inputs are accepted (copied); strided outputs are rejected
        """
        if input is None:
            raise MissingBufferError("input")

        source = byte_view(input, "input")
        size = source.nbytes

        if start_index < 0 or start_index > size:
            raise BufferRangeError("start_index", start_index, size)

        if length < 0 or length > size - start_index:
            raise BufferRangeError("length", length, size - start_index)

        if output is None:
            raise MissingBufferError("output")

        target = byte_view(output, "output", writable=True)

        required = self.estimate_output_length(length)
        if target.nbytes < required:
            raise OutputTooSmallError(required, target.nbytes)

        return source[start_index:start_index + length], target

    def __repr__(self) -> str:
        return "{}(encoding={!r})".format(type(self).__name__, self.encoding.value)
