"""Base64 codecs in the standard and URL-safe alphabets."""

import base64
import binascii

from .codec import ByteCodec
from .errors import MalformedInput

_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


def decode_base64(text: str) -> bytes:
    """Decode standard or URL-safe Base64.

    ``-`` and ``_`` are read as ``+`` and ``/``, and missing ``=`` padding is
    restored before decoding.

    Args:
        text: The Base64 string to decode

    Returns:
        The decoded bytes

    Raises:
        MalformedInput: If the string has an invalid length or characters
    """
    body = text.strip().translate(_URLSAFE_TO_STANDARD).rstrip("=")
    if len(body) % 4 == 1:
        raise MalformedInput(f"Invalid Base64 length: {len(body)} symbols")
    try:
        return base64.b64decode(body + "=" * (-len(body) % 4), validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedInput(f"Invalid Base64 input: {e}") from e


class Base64Codec(ByteCodec):
    """Standard Base64 with ``=`` padding."""

    def encode(self, data: bytes) -> str:
        return base64.b64encode(data).decode("ascii")

    def decode(self, text: str) -> bytes:
        return decode_base64(text)


class UrlSafeBase64Codec(Base64Codec):
    """Base64 with ``-`` and ``_`` in place of ``+`` and ``/``.

    Decoding is shared with the standard codec, which accepts both alphabets.
    """

    def encode(self, data: bytes) -> str:
        return base64.urlsafe_b64encode(data).decode("ascii")
