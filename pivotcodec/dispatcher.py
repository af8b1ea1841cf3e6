"""Conversion between formats through the byte pivot.

Input text is decoded to bytes with the input format's codec, then encoded
with the output format's codec. Text transforms are applied to the UTF-8
text of the bytes instead.

``convert`` never raises: any failure, including an unknown format, yields
an empty string. ``try_convert`` returns the same text along with the error
that caused it, for callers that want to report problems.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .errors import CodecError, UnsupportedFormat
from .formats import DEFAULT_REGISTRY, FormatId, FormatRegistry, FormatSpec
from .text_codec import Utf8Codec

logger = logging.getLogger(__name__)

FormatName = Union[FormatId, str]


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a conversion: the output text, or the error that blanked it."""

    text: str
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Dispatcher:
    """Routes conversions to the codecs of a ``FormatRegistry``."""

    def __init__(self, registry: FormatRegistry = DEFAULT_REGISTRY) -> None:
        self.registry = registry
        self._text = Utf8Codec()

    def decode(self, text: str, input_format: FormatName) -> bytes:
        """Decode ``text`` with the input format's codec, raising on failure.

        Raises:
            UnsupportedFormat: If the format is unknown or output-only
            MalformedInput: If the text is invalid for the format
        """
        spec = self.registry.input_spec(input_format)
        if not text:
            return b""
        return spec.codec.decode(text)

    def encode(self, data: bytes, output_format: FormatName) -> str:
        """Encode ``data`` with the output format, raising on failure.

        Raises:
            UnsupportedFormat: If the format is unknown
            MalformedInput: If the codec cannot represent the data
        """
        spec: FormatSpec = self.registry.get(output_format)
        if spec.transform is not None:
            return spec.transform.encode(self._text.encode(data))
        return spec.codec.encode(data)

    def convert_input(self, text: str, input_format: FormatName) -> bytes:
        """Decode input text to bytes.

        Empty text short-circuits to empty bytes without touching a codec.

        Args:
            text: The text to decode
            input_format: Format of ``text``

        Returns:
            The decoded bytes, or empty bytes if decoding failed
        """
        if not text:
            return b""
        try:
            return self.decode(text, input_format)
        except UnsupportedFormat as e:
            logger.warning("%s", e)
        except CodecError as e:
            logger.debug("Failed to decode %s input: %s", input_format, e)
        except Exception:
            logger.exception("Unexpected error decoding %s input", input_format)
        return b""

    def try_convert(
        self,
        text: str,
        input_format: FormatName,
        output_format: FormatName,
    ) -> ConversionResult:
        """Convert ``text`` and report any error alongside the (empty) output.

        Empty decoded bytes produce an empty, successful result, so a
        genuinely empty payload cannot be told apart from empty input.
        """
        try:
            data = self.decode(text, input_format)
            if not data:
                return ConversionResult("")
            return ConversionResult(self.encode(data, output_format))
        except Exception as e:
            return ConversionResult("", e)

    def convert(
        self,
        text: str,
        input_format: FormatName,
        output_format: FormatName,
    ) -> str:
        """Convert ``text`` from one format to another.

        Args:
            text: The text to convert
            input_format: Format of ``text``; must be an input format
            output_format: Format to produce

        Returns:
            The converted text, or an empty string if the input is empty or
            any step failed

        Examples:
            >>> convert("Hello", "UTF-8", "Base64")
            'SGVsbG8='
            >>> convert("48656c6c6f", "Hex", "UTF-8")
            'Hello'
            >>> convert("zzz", "Hex", "UTF-8")
            ''
        """
        data = self.convert_input(text, input_format)
        if not data:
            return ""
        try:
            return self.encode(data, output_format)
        except UnsupportedFormat as e:
            logger.warning("%s", e)
        except CodecError as e:
            logger.debug("Failed to encode %s output: %s", output_format, e)
        except Exception:
            logger.exception("Unexpected error encoding %s output", output_format)
        return ""

    def swap(
        self,
        text: str,
        input_format: FormatName,
        output_format: FormatName,
    ) -> Tuple[str, FormatId, FormatId]:
        """Turn a conversion around so its output becomes the next input.

        Returns:
            ``(converted_text, output_format, input_format)``

        Raises:
            UnsupportedFormat: If the output format cannot be used as input
        """
        new_input = self.registry.input_spec(output_format).format_id
        new_output = self.registry.get(input_format).format_id
        return self.convert(text, input_format, output_format), new_input, new_output


_default_dispatcher = Dispatcher()


def convert_input(text: str, input_format: FormatName) -> bytes:
    """Decode ``text`` with the default registry. See ``Dispatcher.convert_input``."""
    return _default_dispatcher.convert_input(text, input_format)


def convert(text: str, input_format: FormatName, output_format: FormatName) -> str:
    """Convert ``text`` with the default registry. See ``Dispatcher.convert``."""
    return _default_dispatcher.convert(text, input_format, output_format)
