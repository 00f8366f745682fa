"""Identity tags for the content transfer encoding family.

WHY: The surrounding pipeline dispatches on which scheme an encoder
implements. A closed enum keeps that identity explicit and lets callers
resolve user-facing names ("7BIT", "chicken") to one canonical value.

HOW: ContentEncoding inherits from str so members compare equal to and
serialize as their header tokens. parse() normalizes case and whitespace.

RULES:
- Values are the lowercase Content-Transfer-Encoding tokens
- The enum names the whole family, including schemes with no encoder here
- Unknown names raise UnsupportedEncodingError
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from mime_encoders.core.errors import UnsupportedEncodingError


class ContentEncoding(str, Enum):
    """Content transfer encodings known to the pipeline."""

    DEFAULT = "default"
    SEVEN_BIT = "7bit"
    EIGHT_BIT = "8bit"
    BINARY = "binary"
    BASE64 = "base64"
    QUOTED_PRINTABLE = "quoted-printable"
    UUENCODE = "x-uuencode"
    CHICKEN = "chicken"

    @classmethod
    def parse(cls, value: Union[str, "ContentEncoding"]) -> "ContentEncoding":
        """Resolve a name or member to a ContentEncoding.

        Accepts enum members unchanged and header tokens in any case,
        e.g. ``"Quoted-Printable"`` or ``" chicken "``.
        """
        if isinstance(value, cls):
            return value
        token = str(value).strip().lower()
        try:
            return cls(token)
        except ValueError:
            raise UnsupportedEncodingError(
                "Unknown content encoding: {!r}".format(value)
            ) from None
