"""Caller contract violations raised by encoders and the registry.

WHY: Callers need typed exceptions to tell a missing buffer from a bad
range or an undersized output. All of them are programming errors on
the caller's side, detected before any byte is written.

HOW: EncoderArgumentError is the common base (a ValueError, so generic
argument handling still catches it). Each subclass covers one class of
violation.

RULES:
- Raised synchronously during argument validation, never mid-write
- Never retried internally
- UnsupportedEncodingError is separate: it is a lookup failure, not a
  buffer contract violation
"""

from typing import Optional


class EncoderArgumentError(ValueError):
    """Base class for encoder argument validation failures."""


class MissingBufferError(EncoderArgumentError):
    """Raised when a required buffer is absent or the output is not writable.

    RULES:
    - Message names the offending argument ("input" or "output")
    """

    def __init__(self, argument: str, reason: str = "is None") -> None:
        self.argument = argument
        super().__init__("{} {}".format(argument, reason))


class BufferRangeError(EncoderArgumentError):
    """Raised when start_index/length do not describe a range inside the input.

    Also raised for a negative length passed to estimate_output_length(),
    in which case ``limit`` is None.
    """

    def __init__(self, argument: str, value: int, limit: Optional[int] = None) -> None:
        self.argument = argument
        self.value = value
        self.limit = limit
        if limit is None:
            detail = "must be non-negative"
        else:
            detail = "valid: 0..{}".format(limit)
        super().__init__("{} {} is out of range ({})".format(argument, value, detail))


class OutputTooSmallError(EncoderArgumentError):
    """Raised when the output buffer cannot hold the worst-case encoded size.

    WHY: Encoders never grow the caller's buffer. Rejecting up front keeps
    the call all-or-nothing.

    RULES:
    - Message includes the required and the available size
    - Callers size buffers with estimate_output_length() to avoid this
    """

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(
            "The output buffer is not large enough to contain the encoded input "
            "(need {} bytes, have {}).".format(required, available)
        )


class UnsupportedEncodingError(ValueError):
    """Raised when no encoder is available for the requested encoding name."""
