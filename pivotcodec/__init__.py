"""Pivotcodec - Convert text between radix, Base32, Base64, UTF-8 and rotation formats."""

__version__ = "0.1.0"

from .codec import ByteCodec, TextTransform
from .errors import CodecError, MalformedInput, InvalidAlphabetCharacter, UnsupportedFormat
from .radix_codec import RadixCodec, BinaryCodec, OctalCodec, HexCodec, DecimalCodec
from .base32_codec import Base32Alphabet, Base32Codec, RFC_4648, BASE32_HEX, Z_BASE_32, CROCKFORD
from .base64_codec import Base64Codec, UrlSafeBase64Codec
from .text_codec import Utf8Codec
from .rotation_codec import RotationCodec, Rot5Codec, Rot13Codec, Rot18Codec, Rot47Codec
from .reversing_codec import ReversingCodec
from .formats import (
    FormatId,
    FormatCategory,
    FormatSpec,
    FormatRegistry,
    DEFAULT_REGISTRY,
    DEFAULT_INPUT_FORMAT,
    DEFAULT_OUTPUT_FORMAT,
)
from .dispatcher import Dispatcher, ConversionResult, convert, convert_input

__all__ = [
    "ByteCodec",
    "TextTransform",
    "CodecError",
    "MalformedInput",
    "InvalidAlphabetCharacter",
    "UnsupportedFormat",
    "RadixCodec",
    "BinaryCodec",
    "OctalCodec",
    "HexCodec",
    "DecimalCodec",
    "Base32Alphabet",
    "Base32Codec",
    "RFC_4648",
    "BASE32_HEX",
    "Z_BASE_32",
    "CROCKFORD",
    "Base64Codec",
    "UrlSafeBase64Codec",
    "Utf8Codec",
    "RotationCodec",
    "Rot5Codec",
    "Rot13Codec",
    "Rot18Codec",
    "Rot47Codec",
    "ReversingCodec",
    "FormatId",
    "FormatCategory",
    "FormatSpec",
    "FormatRegistry",
    "DEFAULT_REGISTRY",
    "DEFAULT_INPUT_FORMAT",
    "DEFAULT_OUTPUT_FORMAT",
    "Dispatcher",
    "ConversionResult",
    "convert",
    "convert_input",
]
