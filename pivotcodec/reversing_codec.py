"""Implementation of a reversing transform."""

from .codec import TextTransform


class ReversingCodec(TextTransform):
    """A transform that reverses strings for both encoding and decoding.

    Reversal works on code points, so combining sequences and grapheme
    clusters are not kept together.
    """

    name = "reverse"

    def encode(self, text: str) -> str:
        """Encode a string by reversing it.

        Args:
            text: The string to encode

        Returns:
            The reversed string
        """
        return text[::-1]

    def decode(self, text: str) -> str:
        """Decode a string by reversing it.

        Args:
            text: The string to decode

        Returns:
            The reversed string
        """
        return text[::-1]
