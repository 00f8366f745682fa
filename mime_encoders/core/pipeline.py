"""Buffered and chunked encoding on top of the encoder contract.

WHY: Most callers just want bytes in, bytes out, or a file piped through
an encoder. Both need the same estimate -> allocate -> encode sequence,
and streaming needs the encode-then-flush discipline stateful schemes
rely on. These helpers own that sequence so callers do not repeat it.

HOW: encode_bytes() sizes one bytearray for the whole input and calls
flush(). encode_stream() reads fixed-size chunks, keeps one reusable
output buffer sized for a full chunk, and holds back one chunk so the
last chunk goes through flush() instead of encode().

RULES:
- Output buffers are always sized with estimate_output_length()
- The final call on any input is flush(), even for empty input
- chunk_size must be >= 1
- For stateless encoders the stream output equals encode_bytes(whole input)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, BinaryIO

from mime_encoders.core.errors import MissingBufferError
from mime_encoders.encoders.base import byte_view

if TYPE_CHECKING:
    from mime_encoders.encoders.base import BaseEncoder

logger = logging.getLogger(__name__)


@dataclass
class StreamStats:
    """Byte and chunk counts for one encode_stream() run."""

    bytes_in: int = 0
    bytes_out: int = 0
    chunks: int = 0


def encode_bytes(data: Any, encoder: BaseEncoder) -> bytes:
    """Encode a whole bytes-like object and return the encoded bytes."""
    if data is None:
        raise MissingBufferError("input")

    source = byte_view(data, "input")
    length = source.nbytes
    output = bytearray(encoder.estimate_output_length(length))
    written = encoder.flush(source, 0, length, output)
    return bytes(output[:written])


def encode_stream(
    source: BinaryIO,
    sink: BinaryIO,
    encoder: BaseEncoder,
    chunk_size: int,
) -> StreamStats:
    """Pipe ``source`` through ``encoder`` into ``sink`` chunk by chunk.

    WHY: Inputs may be larger than memory, and the CLI reads from stdin
    where the total size is unknown up front.

    HOW: Reads one chunk ahead. While another chunk follows, the current
    one goes through encode(); the last one goes through flush(). One
    output bytearray sized for ``chunk_size`` input bytes is reused for
    every call and only the written prefix is passed to the sink.

    RULES:
    - source.read() may return fewer bytes than requested; short reads
      are encoded as they come
    - The encoder is not reset; pass a fresh or reset() encoder

    Args:
        source: Binary file-like object to read from.
        sink: Binary file-like object to write encoded bytes to.
        encoder: Any BaseEncoder.
        chunk_size: Maximum input bytes per encoder call.

    Returns:
        StreamStats with total input bytes, output bytes, and encoder calls.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1, got {}".format(chunk_size))

    output = bytearray(encoder.estimate_output_length(chunk_size))
    view = memoryview(output)
    stats = StreamStats()

    current = source.read(chunk_size)
    while True:
        following = source.read(chunk_size) if current else b""
        final = not following

        if final:
            written = encoder.flush(current, 0, len(current), output)
        else:
            written = encoder.encode(current, 0, len(current), output)

        sink.write(view[:written])
        stats.bytes_in += len(current)
        stats.bytes_out += written
        stats.chunks += 1
        logger.debug(
            "Chunk %d: %d bytes in, %d bytes out%s",
            stats.chunks, len(current), written, " (flush)" if final else "",
        )

        if final:
            break
        current = following

    logger.debug(
        "Encoded %d bytes -> %d bytes with %s in %d chunk(s)",
        stats.bytes_in, stats.bytes_out, encoder.encoding.value, stats.chunks,
    )
    return stats
