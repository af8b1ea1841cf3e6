"""Base32 codecs for the RFC-4648, Extended Hex, z-base-32 and Crockford alphabets.

All variants share one bit-packing engine. Bits are taken five at a time from
the most significant bit of the byte stream; the final group is filled with
zero bits on the right. Variants differ only in their 32-symbol table, their
padding character and how forgiving decoding is.
"""

from dataclasses import dataclass, field
from functools import cached_property
from typing import Dict, Mapping, Optional

from .codec import ByteCodec
from .errors import InvalidAlphabetCharacter


@dataclass(frozen=True)
class Base32Alphabet:
    """Symbol table and decoding rules for one Base32 variant.

    Attributes:
        name: Human readable variant name, used in error messages
        symbols: The 32 output symbols, indexed by 5-bit value
        padding: Character used to pad output to a multiple of 8 symbols,
                 or None for unpadded variants
        case_insensitive: Accept either case when decoding
        aliases: Extra decode-only characters mapped onto a symbol
        ignored: Characters skipped entirely when decoding
    """

    name: str
    symbols: str
    padding: Optional[str] = None
    case_insensitive: bool = False
    aliases: Mapping[str, str] = field(default_factory=dict)
    ignored: str = ""

    def __post_init__(self) -> None:
        if len(self.symbols) != 32 or len(set(self.symbols)) != 32:
            raise ValueError(f"{self.name} alphabet must have 32 distinct symbols")

    @cached_property
    def lookup_table(self) -> Dict[str, int]:
        """Character to 5-bit value table used for decoding, built once."""
        table = {char: value for value, char in enumerate(self.symbols)}
        for alias, target in self.aliases.items():
            table[alias] = table[target]
        if self.case_insensitive:
            for char, value in list(table.items()):
                table.setdefault(char.lower(), value)
                table.setdefault(char.upper(), value)
        return table


RFC_4648 = Base32Alphabet(
    name="RFC-4648",
    symbols="ABCDEFGHIJKLMNOPQRSTUVWXYZ234567",
    padding="=",
)

BASE32_HEX = Base32Alphabet(
    name="Extended hex",
    symbols="0123456789ABCDEFGHIJKLMNOPQRSTUV",
    padding="=",
)

Z_BASE_32 = Base32Alphabet(
    name="z-base-32",
    symbols="ybndrfg8ejkmcpqxot1uwisza345h769",
)

CROCKFORD = Base32Alphabet(
    name="Crockford",
    symbols="0123456789ABCDEFGHJKMNPQRSTVWXYZ",
    case_insensitive=True,
    aliases={"I": "1", "L": "1", "O": "0"},
    ignored="-",
)


def encode_base32(data: bytes, alphabet: Base32Alphabet) -> str:
    """Encode bytes with the given Base32 alphabet.

    Args:
        data: The bytes to encode
        alphabet: Variant to encode with

    Returns:
        The encoded string, padded to a multiple of 8 symbols when the
        variant has a padding character
    """
    symbols = alphabet.symbols
    out = []
    buffer = 0
    bits = 0
    for byte in data:
        buffer = (buffer << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            out.append(symbols[(buffer >> bits) & 0x1F])
        buffer &= (1 << bits) - 1
    if bits:
        out.append(symbols[(buffer << (5 - bits)) & 0x1F])
    if alphabet.padding:
        out.append(alphabet.padding * (-len(out) % 8))
    return "".join(out)


def decode_base32(text: str, alphabet: Base32Alphabet) -> bytes:
    """Decode a string written with the given Base32 alphabet.

    Trailing padding is stripped and leftover bits that do not make a whole
    byte are discarded.

    Args:
        text: The string to decode
        alphabet: Variant to decode with

    Returns:
        The decoded bytes

    Raises:
        InvalidAlphabetCharacter: If a character is not part of the variant
    """
    table = alphabet.lookup_table
    body = text.rstrip(alphabet.padding) if alphabet.padding else text
    result = bytearray()
    buffer = 0
    bits = 0
    for position, char in enumerate(body):
        if char in alphabet.ignored:
            continue
        value = table.get(char)
        if value is None:
            raise InvalidAlphabetCharacter(char, position, alphabet.name)
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            result.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1
    return bytes(result)


class Base32Codec(ByteCodec):
    """A Base32 codec bound to one alphabet variant."""

    def __init__(self, alphabet: Base32Alphabet = RFC_4648) -> None:
        self.alphabet = alphabet

    def encode(self, data: bytes) -> str:
        return encode_base32(data, self.alphabet)

    def decode(self, text: str) -> bytes:
        return decode_base32(text, self.alphabet)

    def __repr__(self) -> str:
        return f"Base32Codec({self.alphabet.name!r})"
