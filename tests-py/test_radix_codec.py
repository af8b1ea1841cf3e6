"""Tests for the radix codecs."""

import unittest
from pivotcodec import (
    BinaryCodec,
    DecimalCodec,
    HexCodec,
    MalformedInput,
    OctalCodec,
    RadixCodec,
)
from pivotcodec.radix_codec import from_radix, to_radix


class TestRadixEncoding(unittest.TestCase):
    """Test cases for fixed-width radix encoding."""

    def test_hex_pads_to_two_digits(self) -> None:
        """A small byte gets a leading zero in hex."""
        self.assertEqual(HexCodec().encode(b"\x0a"), "0a")

    def test_binary_full_byte(self) -> None:
        """0xFF is eight ones."""
        self.assertEqual(BinaryCodec().encode(b"\xff"), "11111111")

    def test_octal_pads_to_three_digits(self) -> None:
        """Octal groups are three digits wide."""
        self.assertEqual(OctalCodec().encode(b"\x07"), "007")

    def test_zero_byte(self) -> None:
        """A zero byte is a full group of zeros."""
        self.assertEqual(BinaryCodec().encode(b"\x00"), "00000000")
        self.assertEqual(HexCodec().encode(b"\x00\x00"), "0000")

    def test_groups_are_concatenated(self) -> None:
        """Groups are joined without separators."""
        self.assertEqual(HexCodec().encode(b"Hello"), "48656c6c6f")
        self.assertEqual(OctalCodec().encode(b"\x01\xff"), "001377")

    def test_custom_radix(self) -> None:
        """Any radix and width can be combined."""
        codec = RadixCodec(4, 4)
        self.assertEqual(codec.encode(b"\x1b"), "0123")
        self.assertEqual(codec.decode("0123"), b"\x1b")

    def test_invalid_radix_rejected(self) -> None:
        """Radix outside 2..36 is a programming error."""
        with self.assertRaises(ValueError):
            RadixCodec(1, 8)
        with self.assertRaises(ValueError):
            RadixCodec(37, 2)


class TestRadixDecoding(unittest.TestCase):
    """Test cases for fixed-width radix decoding."""

    def test_hex_decode(self) -> None:
        """Hex decodes byte by byte."""
        self.assertEqual(HexCodec().decode("48656c6c6f"), b"Hello")

    def test_hex_uppercase_accepted(self) -> None:
        """Hex digits are case-insensitive."""
        self.assertEqual(HexCodec().decode("0A"), b"\x0a")

    def test_short_input_left_padded(self) -> None:
        """Input is zero-padded on the left to a whole number of groups."""
        self.assertEqual(HexCodec().decode("abc"), b"\x0a\xbc")
        self.assertEqual(BinaryCodec().decode("1"), b"\x01")
        self.assertEqual(OctalCodec().decode("7001"), b"\x07\x01")

    def test_non_digit_rejected(self) -> None:
        """Characters outside the radix raise MalformedInput."""
        with self.assertRaises(MalformedInput):
            HexCodec().decode("zzz")
        with self.assertRaises(MalformedInput):
            BinaryCodec().decode("10201010")
        with self.assertRaises(MalformedInput):
            OctalCodec().decode("089")

    def test_sign_and_underscore_rejected(self) -> None:
        """Characters int() would tolerate are still rejected."""
        with self.assertRaises(MalformedInput):
            HexCodec().decode("+f")
        with self.assertRaises(MalformedInput):
            HexCodec().decode("f_f")

    def test_octal_group_overflow(self) -> None:
        """An octal group above 255 does not fit in a byte."""
        with self.assertRaises(MalformedInput):
            OctalCodec().decode("777")

    def test_helpers_match_codecs(self) -> None:
        """Module-level helpers behave like the codec classes."""
        self.assertEqual(to_radix(b"\xff\x00", 16, 2), "ff00")
        self.assertEqual(from_radix("ff00", 16, 2), b"\xff\x00")

    def test_roundtrip_all_bytes(self) -> None:
        """Every byte value survives each fixed-width codec."""
        data = bytes(range(256))
        for codec in (BinaryCodec(), OctalCodec(), HexCodec()):
            with self.subTest(codec=codec):
                self.assertEqual(codec.decode(codec.encode(data)), data)


class TestDecimalCodec(unittest.TestCase):
    """Test cases for the big-integer decimal codec."""

    def setUp(self) -> None:
        """Set up test fixtures."""
        self.codec = DecimalCodec()

    def test_decode_single_byte(self) -> None:
        """255 is one 0xFF byte."""
        self.assertEqual(self.codec.decode("255"), b"\xff")

    def test_encode_two_bytes(self) -> None:
        """Bytes are read as one big-endian integer."""
        self.assertEqual(self.codec.encode(b"\x01\x00"), "256")

    def test_decode_two_bytes(self) -> None:
        """Values above 255 produce several bytes."""
        self.assertEqual(self.codec.decode("256"), b"\x01\x00")

    def test_decode_zero(self) -> None:
        """Zero decodes to a single zero byte."""
        self.assertEqual(self.codec.decode("0"), b"\x00")

    def test_leading_zero_bytes_lost(self) -> None:
        """Leading zero bytes do not survive a round trip."""
        encoded = self.codec.encode(b"\x00\x01")
        self.assertEqual(encoded, "1")
        self.assertEqual(self.codec.decode(encoded), b"\x01")

    def test_large_integer(self) -> None:
        """Integers far beyond a machine word are supported."""
        value = 2 ** 200
        data = self.codec.decode(str(value))
        self.assertEqual(data, b"\x01" + b"\x00" * 25)
        self.assertEqual(self.codec.encode(data), str(value))

    def test_roundtrip_payload_beyond_digit_limit(self) -> None:
        """Payloads whose decimal form exceeds 4300 digits round-trip."""
        data = b"\x9c" + bytes(range(256)) * 16
        encoded = self.codec.encode(data)
        self.assertGreater(len(encoded), 4300)
        self.assertEqual(self.codec.decode(encoded), data)

    def test_decode_long_digit_string(self) -> None:
        """Decimal strings longer than 4300 digits decode."""
        data = self.codec.decode("9" * 5000)
        self.assertEqual(self.codec.encode(data), "9" * 5000)

    def test_whitespace_trimmed(self) -> None:
        """Surrounding whitespace is ignored."""
        self.assertEqual(self.codec.decode(" 42\n"), b"\x2a")

    def test_invalid_integers_rejected(self) -> None:
        """Signs, letters and empty strings are not unsigned integers."""
        for text in ("-5", "+5", "12a", "1 2", "", "0x10"):
            with self.subTest(text=text):
                with self.assertRaises(MalformedInput):
                    self.codec.decode(text)


if __name__ == "__main__":
    unittest.main()
