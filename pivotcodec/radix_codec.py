"""Fixed-width radix codecs: binary, octal, hex and big-integer decimal.

Each byte is written as a group of digits in the target radix, left-padded
with zeros to a fixed width and concatenated without separators:

    binary  radix 2,  width 8   b"\\xff" -> "11111111"
    octal   radix 8,  width 3   b"\\x07" -> "007"
    hex     radix 16, width 2   b"\\x0a" -> "0a"

Decimal is not byte-wise. The whole byte sequence is read as one big-endian
unsigned integer and rendered in base 10, so leading zero bytes do not
survive a round trip.
"""

import re

from .codec import ByteCodec
from .errors import MalformedInput

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_DECIMAL_PATTERN = re.compile(r"[0-9]+")

# int <-> str in base 10 is capped at 4300 digits; stay well under it
_DECIMAL_CHUNK = 1000
_DECIMAL_CHUNK_BASE = 10 ** _DECIMAL_CHUNK


def _int_to_decimal(value: int) -> str:
    """Render a non-negative integer of any size in base 10."""
    parts = []
    while value >= _DECIMAL_CHUNK_BASE:
        value, remainder = divmod(value, _DECIMAL_CHUNK_BASE)
        parts.append(str(remainder).zfill(_DECIMAL_CHUNK))
    parts.append(str(value))
    return "".join(reversed(parts))


def _decimal_to_int(digits: str) -> int:
    """Parse a string of ASCII digits of any length."""
    value = 0
    for start in range(0, len(digits), _DECIMAL_CHUNK):
        chunk = digits[start:start + _DECIMAL_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def to_radix(data: bytes, radix: int, width: int) -> str:
    """Render each byte in ``radix``, zero-padded to ``width`` digits.

    Args:
        data: The bytes to encode
        radix: Numeric base between 2 and 36
        width: Number of digits per byte

    Returns:
        The concatenated digit groups
    """
    groups = []
    for byte in data:
        digits = []
        while byte:
            byte, remainder = divmod(byte, radix)
            digits.append(DIGITS[remainder])
        groups.append("".join(reversed(digits)).rjust(width, "0"))
    return "".join(groups)


def from_radix(text: str, radix: int, width: int) -> bytes:
    """Parse ``width``-digit groups in ``radix`` back into bytes.

    The input is left-padded with ``'0'`` until its length is a multiple of
    ``width`` before being split into groups.

    Args:
        text: Digit string to decode
        radix: Numeric base between 2 and 36
        width: Number of digits per byte

    Returns:
        The decoded bytes

    Raises:
        MalformedInput: If a character is not a digit of ``radix`` or a group
            does not fit in a byte
    """
    allowed = DIGITS[:radix]
    for position, char in enumerate(text):
        if char.lower() not in allowed:
            raise MalformedInput(
                f"Invalid digit {char!r} for radix {radix} at position {position}"
            )

    padded = text.rjust(len(text) + (-len(text) % width), "0")
    result = bytearray()
    for start in range(0, len(padded), width):
        value = int(padded[start:start + width], radix)
        if value > 0xFF:
            raise MalformedInput(
                f"Group {padded[start:start + width]!r} exceeds one byte in radix {radix}"
            )
        result.append(value)
    return bytes(result)


class RadixCodec(ByteCodec):
    """A codec writing each byte as a fixed-width group of radix digits."""

    def __init__(self, radix: int, width: int) -> None:
        if not 2 <= radix <= len(DIGITS):
            raise ValueError(f"radix must be between 2 and {len(DIGITS)}, got {radix}")
        if width < 1:
            raise ValueError(f"width must be positive, got {width}")
        self.radix = radix
        self.width = width

    def encode(self, data: bytes) -> str:
        return to_radix(data, self.radix, self.width)

    def decode(self, text: str) -> bytes:
        return from_radix(text, self.radix, self.width)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(radix={self.radix}, width={self.width})"


class BinaryCodec(RadixCodec):
    """Eight binary digits per byte."""

    def __init__(self) -> None:
        super().__init__(2, 8)


class OctalCodec(RadixCodec):
    """Three octal digits per byte."""

    def __init__(self) -> None:
        super().__init__(8, 3)


class HexCodec(RadixCodec):
    """Two lowercase hex digits per byte."""

    def __init__(self) -> None:
        super().__init__(16, 2)


class DecimalCodec(ByteCodec):
    """A codec treating the whole byte sequence as one unsigned integer.

    Encoding goes through hex: the bytes are hex-encoded, read as a single
    big-endian integer and written in base 10. Decoding reverses the bridge,
    so ``decode("255") == b"\\xff"`` and ``encode(b"\\x01\\x00") == "256"``.
    """

    def __init__(self) -> None:
        self._hex = HexCodec()

    def encode(self, data: bytes) -> str:
        """Encode bytes as a base 10 integer.

        Args:
            data: The bytes to encode

        Returns:
            The decimal representation of the big-endian integer
        """
        return _int_to_decimal(int(self._hex.encode(data) or "0", 16))

    def decode(self, text: str) -> bytes:
        """Decode a base 10 integer into its big-endian bytes.

        Args:
            text: Unsigned decimal integer, surrounding whitespace allowed

        Returns:
            The minimal big-endian byte sequence for the integer (at least one
            byte, so ``"0"`` decodes to ``b"\\x00"``)

        Raises:
            MalformedInput: If the text is not an unsigned decimal integer
        """
        stripped = text.strip()
        if not _DECIMAL_PATTERN.fullmatch(stripped):
            raise MalformedInput(f"Not an unsigned decimal integer: {text!r}")
        return self._hex.decode(format(_decimal_to_int(stripped), "x"))
