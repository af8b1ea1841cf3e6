"""Character rotation ciphers: ROT5, ROT13, ROT18 and ROT47.

Each cipher shifts the characters of one or more ranges halfway around that
range and leaves everything else alone, which makes all of them involutions.
"""

from typing import Dict, Iterable, Tuple

from .codec import TextTransform


def _rotation_table(ranges: Iterable[Tuple[str, str]]) -> Dict[int, int]:
    """Build a ``str.translate`` table rotating each inclusive range by half its size."""
    table = {}
    for first, last in ranges:
        start = ord(first)
        size = ord(last) - start + 1
        shift = size // 2
        for offset in range(size):
            table[start + offset] = start + (offset + shift) % size
    return table


class RotationCodec(TextTransform):
    """A rotation cipher over a fixed set of character ranges."""

    name = "rot"
    ranges: Tuple[Tuple[str, str], ...] = ()

    def __init__(self) -> None:
        self._table = _rotation_table(self.ranges)

    def _rotate(self, text: str) -> str:
        return text.translate(self._table)

    def encode(self, text: str) -> str:
        """Rotate the characters of ``text``."""
        return self._rotate(text)

    def decode(self, text: str) -> str:
        """Rotate back; identical to ``encode`` since the rotation is symmetric."""
        return self._rotate(text)


class Rot5Codec(RotationCodec):
    """Rotate digits ``0-9`` by 5."""

    name = "rot5"
    ranges = (("0", "9"),)


class Rot13Codec(RotationCodec):
    """Rotate letters by 13 within their own case."""

    name = "rot13"
    ranges = (("A", "Z"), ("a", "z"))


class Rot18Codec(RotationCodec):
    """ROT13 on letters combined with ROT5 on digits."""

    name = "rot18"
    ranges = Rot5Codec.ranges + Rot13Codec.ranges


class Rot47Codec(RotationCodec):
    """Rotate the 94 printable ASCII characters ``!`` through ``~`` by 47."""

    name = "rot47"
    ranges = (("!", "~"),)
