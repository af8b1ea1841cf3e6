"""Tests for ReversingCodec."""

import unittest
from pivotcodec import ReversingCodec


class TestReversingCodec(unittest.TestCase):
    """Test cases for ReversingCodec."""

    def setUp(self) -> None:
        """Set up test fixtures."""
        self.codec = ReversingCodec()

    def test_encode_simple_string(self) -> None:
        """Test encoding a simple string."""
        result = self.codec.encode("hello")
        self.assertEqual(result, "olleh")

    def test_decode_simple_string(self) -> None:
        """Test decoding a simple string."""
        result = self.codec.decode("olleh")
        self.assertEqual(result, "hello")

    def test_involution(self) -> None:
        """Test that reversing twice returns the original string."""
        original = "pivotcodec"
        self.assertEqual(self.codec.encode(self.codec.encode(original)), original)

    def test_encode_empty_string(self) -> None:
        """Test encoding an empty string."""
        self.assertEqual(self.codec.encode(""), "")

    def test_encode_palindrome(self) -> None:
        """Test encoding a palindrome."""
        palindrome = "racecar"
        self.assertEqual(self.codec.encode(palindrome), palindrome)

    def test_encode_with_unicode(self) -> None:
        """Test encoding a string with unicode characters."""
        result = self.codec.encode("hello 世界")
        self.assertEqual(result, "界世 olleh")


if __name__ == "__main__":
    unittest.main()
