"""Format identifiers and the registry binding each format to its codec.

Every format is one of two kinds:

- Byte formats (hex, Base32, Base64, UTF-8, ...) have a ``ByteCodec`` and
  can be used both as input and as output.
- Text transforms (rotation ciphers, reversal) have a ``TextTransform``
  applied to the UTF-8 text of the bytes. They are output-only.

URL-safe Base64 is also output-only, since the Base64 input already accepts
the URL-safe alphabet.
"""

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .base32_codec import BASE32_HEX, CROCKFORD, RFC_4648, Z_BASE_32, Base32Codec
from .base64_codec import Base64Codec, UrlSafeBase64Codec
from .codec import ByteCodec, TextTransform
from .errors import UnsupportedFormat
from .radix_codec import BinaryCodec, DecimalCodec, HexCodec, OctalCodec
from .reversing_codec import ReversingCodec
from .rotation_codec import Rot5Codec, Rot13Codec, Rot18Codec, Rot47Codec
from .text_codec import Utf8Codec


def _normalize(name: str) -> str:
    return re.sub(r"[^0-9a-z]", "", name.lower())


class FormatId(Enum):
    """Supported encodings and transforms, valued by their display label."""

    BINARY = "Binary"
    OCTAL = "Octal"
    DECIMAL = "Decimal"
    HEX = "Hex"
    BASE32_RFC4648 = "Base32 (RFC-4648)"
    BASE32_HEX = "Base32 (Extended hex)"
    BASE32_Z = "Base32 (z-base)"
    BASE32_CROCKFORD = "Base32 (Crockford)"
    BASE64 = "Base64"
    BASE64_URL = "Base64 (URL-safe)"
    UTF8 = "UTF-8"
    ROT5 = "Rot5"
    ROT13 = "Rot13"
    ROT18 = "Rot18"
    ROT47 = "Rot47"
    REVERSE = "Reverse"

    @classmethod
    def parse(cls, name: Union["FormatId", str]) -> "FormatId":
        """Resolve a member, its label or its member name to a ``FormatId``.

        Names are compared ignoring case and any non-alphanumeric character,
        so ``"Base32RFC4648"``, ``"base32_rfc4648"`` and ``"Base32 (RFC-4648)"``
        all resolve to ``BASE32_RFC4648``.

        Raises:
            UnsupportedFormat: If no format matches
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            key = _normalize(name)
            for member in cls:
                if key in (_normalize(member.value), _normalize(member.name)):
                    return member
        raise UnsupportedFormat(name)


class FormatCategory(Enum):
    """Groups used when presenting formats to a user."""

    COMMON = "Common"
    BASE32 = "Base32"
    ROTATION = "Rotation"
    OTHER = "Other"


@dataclass(frozen=True)
class FormatSpec:
    """Binds one format to its category and implementation.

    Exactly one of ``codec`` and ``transform`` is set. A format with a codec
    is usable as input unless ``input_allowed`` is False; a format with a
    transform is always output-only.
    """

    format_id: FormatId
    category: FormatCategory
    codec: Optional[ByteCodec] = None
    transform: Optional[TextTransform] = None
    input_allowed: bool = True

    def __post_init__(self) -> None:
        if (self.codec is None) == (self.transform is None):
            raise ValueError(f"{self.format_id.value} needs exactly one of codec or transform")

    @property
    def label(self) -> str:
        return self.format_id.value

    @property
    def is_input(self) -> bool:
        return self.codec is not None and self.input_allowed


class FormatRegistry:
    """Read-only mapping from ``FormatId`` to ``FormatSpec``.

    Insertion order of the specs is the presentation order of the formats.
    """

    def __init__(self, specs: Iterable[FormatSpec]) -> None:
        entries: Dict[FormatId, FormatSpec] = {}
        for spec in specs:
            if spec.format_id in entries:
                raise ValueError(f"Duplicate format: {spec.format_id.value}")
            entries[spec.format_id] = spec
        self._specs: Mapping[FormatId, FormatSpec] = MappingProxyType(entries)

    @property
    def specs(self) -> Mapping[FormatId, FormatSpec]:
        return self._specs

    def get(self, name: Union[FormatId, str]) -> FormatSpec:
        """Look up a format by member or name.

        Raises:
            UnsupportedFormat: If the format is unknown or not registered
        """
        format_id = FormatId.parse(name)
        try:
            return self._specs[format_id]
        except KeyError:
            raise UnsupportedFormat(name) from None

    def input_spec(self, name: Union[FormatId, str]) -> FormatSpec:
        """Look up a format usable as input.

        Raises:
            UnsupportedFormat: If the format is unknown or output-only
        """
        spec = self.get(name)
        if not spec.is_input:
            raise UnsupportedFormat(name, "input")
        return spec

    def input_formats(self) -> List[FormatId]:
        return [fid for fid, spec in self._specs.items() if spec.is_input]

    def output_formats(self) -> List[FormatId]:
        return list(self._specs)

    def grouped(self, formats: Iterable[FormatId]) -> List[Tuple[FormatCategory, List[FormatId]]]:
        """Group formats by category, keeping category and format order.

        Args:
            formats: Formats to group, typically ``input_formats()`` or
                     ``output_formats()``

        Returns:
            ``(category, formats)`` pairs for every non-empty category
        """
        wanted = set(formats)
        groups = []
        for category in FormatCategory:
            members = [
                fid for fid, spec in self._specs.items()
                if fid in wanted and spec.category is category
            ]
            if members:
                groups.append((category, members))
        return groups

    def __contains__(self, name: object) -> bool:
        try:
            return FormatId.parse(name) in self._specs  # type: ignore[arg-type]
        except UnsupportedFormat:
            return False

    def __iter__(self):
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)


def build_default_registry() -> FormatRegistry:
    """Create the registry of every built-in format."""
    common = FormatCategory.COMMON
    base32 = FormatCategory.BASE32
    rotation = FormatCategory.ROTATION
    return FormatRegistry([
        FormatSpec(FormatId.BINARY, common, codec=BinaryCodec()),
        FormatSpec(FormatId.OCTAL, common, codec=OctalCodec()),
        FormatSpec(FormatId.DECIMAL, common, codec=DecimalCodec()),
        FormatSpec(FormatId.HEX, common, codec=HexCodec()),
        FormatSpec(FormatId.BASE64, common, codec=Base64Codec()),
        FormatSpec(FormatId.BASE64_URL, common, codec=UrlSafeBase64Codec(), input_allowed=False),
        FormatSpec(FormatId.UTF8, common, codec=Utf8Codec()),
        FormatSpec(FormatId.BASE32_RFC4648, base32, codec=Base32Codec(RFC_4648)),
        FormatSpec(FormatId.BASE32_HEX, base32, codec=Base32Codec(BASE32_HEX)),
        FormatSpec(FormatId.BASE32_Z, base32, codec=Base32Codec(Z_BASE_32)),
        FormatSpec(FormatId.BASE32_CROCKFORD, base32, codec=Base32Codec(CROCKFORD)),
        FormatSpec(FormatId.ROT5, rotation, transform=Rot5Codec()),
        FormatSpec(FormatId.ROT13, rotation, transform=Rot13Codec()),
        FormatSpec(FormatId.ROT18, rotation, transform=Rot18Codec()),
        FormatSpec(FormatId.ROT47, rotation, transform=Rot47Codec()),
        FormatSpec(FormatId.REVERSE, FormatCategory.OTHER, transform=ReversingCodec()),
    ])


DEFAULT_REGISTRY = build_default_registry()

DEFAULT_INPUT_FORMAT = FormatId.UTF8
DEFAULT_OUTPUT_FORMAT = FormatId.BASE64
