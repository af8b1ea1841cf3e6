"""Error types raised by codecs and the format registry."""

from typing import Optional


class CodecError(ValueError):
    """Base class for every error raised by the codec layer."""


class MalformedInput(CodecError):
    """Input does not match the format: wrong digits, bad length or padding."""


class InvalidAlphabetCharacter(MalformedInput):
    """A character outside the codec's alphabet was found while decoding."""

    def __init__(self, character: str, position: int, alphabet: Optional[str] = None) -> None:
        self.character = character
        self.position = position
        self.alphabet = alphabet
        where = f" in {alphabet}" if alphabet else ""
        super().__init__(f"Invalid character {character!r} at position {position}{where}")


class UnsupportedFormat(CodecError):
    """The requested format is not registered (or not usable in that direction)."""

    def __init__(self, name: object, direction: Optional[str] = None) -> None:
        self.name = name
        self.direction = direction
        suffix = f" as {direction} format" if direction else ""
        super().__init__(f"Unsupported format{suffix}: {name!r}")
