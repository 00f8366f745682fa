"""Encoder registry — scheme dispatch hub.

WHY: The CLI and the pipeline helpers receive an encoding by name
("chicken", "7bit") and need a fresh encoder for it. A central dict
keeps the set of supported schemes in one place.

HOW: ENCODERS maps each ContentEncoding to a zero-argument *factory*
(a class or a partial), not an instance. create_encoder() parses the
name and calls the factory, so every caller gets its own instance.

RULES:
- Keys are ContentEncoding members
- Values are callables returning a new BaseEncoder
- Family members with no encoder here (base64, quoted-printable,
  x-uuencode) are deliberately absent and raise UnsupportedEncodingError
"""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict, Union

from mime_encoders.core.encoding import ContentEncoding
from mime_encoders.core.errors import UnsupportedEncodingError
from mime_encoders.encoders.base import BaseEncoder
from mime_encoders.encoders.chicken import ChickenEncoder
from mime_encoders.encoders.passthrough import PassThroughEncoder

ENCODERS: Dict[ContentEncoding, Callable[[], BaseEncoder]] = {
    ContentEncoding.DEFAULT: partial(PassThroughEncoder, ContentEncoding.DEFAULT),
    ContentEncoding.SEVEN_BIT: partial(PassThroughEncoder, ContentEncoding.SEVEN_BIT),
    ContentEncoding.EIGHT_BIT: partial(PassThroughEncoder, ContentEncoding.EIGHT_BIT),
    ContentEncoding.BINARY: partial(PassThroughEncoder, ContentEncoding.BINARY),
    ContentEncoding.CHICKEN: ChickenEncoder,
}


def create_encoder(encoding: Union[str, ContentEncoding]) -> BaseEncoder:
    """Return a new encoder for ``encoding`` (a ContentEncoding or its name).

    Raises:
        UnsupportedEncodingError: the name is unknown, or no encoder is
            registered for it.
    """
    key = ContentEncoding.parse(encoding)
    factory = ENCODERS.get(key)
    if factory is None:
        raise UnsupportedEncodingError(
            "No encoder registered for {}. Available: {}".format(
                key.value, ", ".join(sorted(e.value for e in ENCODERS)),
            )
        )
    return factory()


__all__ = [
    "ENCODERS",
    "BaseEncoder",
    "ChickenEncoder",
    "PassThroughEncoder",
    "create_encoder",
]
