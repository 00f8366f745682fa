"""Configuration defaults and .env loading.

WHY: The CLI's default encoding, chunk size and log level should be
adjustable per machine or per project without editing code or passing
flags every time.

HOW: python-dotenv loads a .env file on import. Defaults are read from
the environment into module-level constants. Values that need parsing
go through small loader functions that fail with a clear message.

RULES:
- All variables are prefixed MIME_ENCODERS_
- Defaults: encoding "chicken", chunk size 4096, log level WARNING
- Invalid values raise ValueError when loaded, not at import
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load .env from the working directory (where the command is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Encoding defaults
# ---------------------------------------------------------------------------

DEFAULT_ENCODING = os.getenv("MIME_ENCODERS_ENCODING", "chicken")
DEFAULT_CHUNK_SIZE_RAW = os.getenv("MIME_ENCODERS_CHUNK_SIZE", "4096")

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("MIME_ENCODERS_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def load_chunk_size(raw: Optional[str] = None) -> int:
    """Parse the streaming chunk size.

    RULES:
    - raw=None means use MIME_ENCODERS_CHUNK_SIZE (or the 4096 default)
    - Raises ValueError for non-integers and values below 1
    """
    value = DEFAULT_CHUNK_SIZE_RAW if raw is None else raw
    try:
        chunk_size = int(str(value).strip())
    except ValueError:
        raise ValueError(
            "Invalid chunk size {!r}: expected a positive integer. "
            "Check MIME_ENCODERS_CHUNK_SIZE in the .env file.".format(value)
        ) from None
    if chunk_size < 1:
        raise ValueError("Chunk size must be at least 1, got {}".format(chunk_size))
    return chunk_size


def load_log_level(raw: Optional[str] = None) -> int:
    """Resolve the log level name to a logging level number.

    RULES:
    - raw=None means use MIME_ENCODERS_LOG_LEVEL (or WARNING)
    - Names are case-insensitive (e.g. "debug", "INFO")
    - Raises ValueError for names the logging module does not know
    """
    name = (LOG_LEVEL if raw is None else raw).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(
            "Invalid log level {!r}: expected one of DEBUG, INFO, WARNING, ERROR, "
            "CRITICAL. Check MIME_ENCODERS_LOG_LEVEL in the .env file.".format(name)
        )
    return level
