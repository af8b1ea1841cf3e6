"""Abstract base classes for codecs."""

from abc import ABC, abstractmethod


class ByteCodec(ABC):
    """Base codec interface for converting between bytes and a string format."""

    @abstractmethod
    def encode(self, data: bytes) -> str:
        """Encode bytes.

        Args:
            data: The bytes to encode

        Returns:
            The encoded string
        """
        pass

    @abstractmethod
    def decode(self, text: str) -> bytes:
        """Decode a string.

        Args:
            text: The string to decode

        Returns:
            The decoded bytes

        Raises:
            MalformedInput: If the string is not valid for this format
        """
        pass


class TextTransform(ABC):
    """Base interface for transforms applied to decoded text rather than bytes."""

    @abstractmethod
    def encode(self, text: str) -> str:
        """Encode a string.

        Args:
            text: The string to encode

        Returns:
            The encoded string
        """
        pass

    @abstractmethod
    def decode(self, text: str) -> str:
        """Decode a string.

        Args:
            text: The string to decode

        Returns:
            The decoded string
        """
        pass
