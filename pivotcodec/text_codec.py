"""UTF-8 text codec, the pivot between human readable text and bytes."""

import re

from .codec import ByteCodec

# Lone surrogates cannot be encoded; platform encoders write U+FFFD instead
_SURROGATE = re.compile("[\ud800-\udfff]")


class Utf8Codec(ByteCodec):
    """Convert between UTF-8 bytes and text.

    Invalid byte sequences are replaced with U+FFFD when encoding to text,
    and lone surrogates are replaced with U+FFFD when decoding text.
    """

    def encode(self, data: bytes) -> str:
        """Encode bytes as text.

        Args:
            data: UTF-8 bytes

        Returns:
            The text the bytes represent
        """
        return data.decode("utf-8", errors="replace")

    def decode(self, text: str) -> bytes:
        """Decode text into its UTF-8 bytes.

        Args:
            text: The text to convert

        Returns:
            The UTF-8 encoded bytes
        """
        return _SURROGATE.sub("\ufffd", text).encode("utf-8")
