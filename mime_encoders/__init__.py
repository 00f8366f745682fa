"""MIME Encoders — pluggable content-transfer-encoding transforms.

WHY: A MIME pipeline needs to invoke any content transfer encoding the
same way — ask for the output size, allocate, encode — without caring
which scheme sits behind the call. This package provides that capability
surface plus the schemes that implement it.

HOW: Two layers — encoders (one module per scheme, all subclassing the
same ABC) and core (scheme identity, error types, buffered/streaming
helpers). A registry maps each ContentEncoding to its encoder factory.

RULES:
- Every encoder implements the same BaseEncoder contract
- Adding a scheme = one new encoder module plus one registry line
- Encoders write only into caller-supplied buffers and never allocate for them
"""

__version__ = "0.1.0"
