import logging
import re
from decimal import Decimal
from typing import Any, Optional, Tuple, Union

from typing_extensions import Self

from .charset import is_printable, is_valid_name, is_valid_value
from .exceptions import (
    InvalidNameError,
    InvalidValueError,
    MalformedLineError,
    MissingNameError,
    MissingValueError,
)
from .types import Encoding, ScalarValueType, ValueFormat
from .wrap import MAX_LINE_LENGTH, can_be_encoded, mime_decode_value, wrap

logger = logging.getLogger(__name__)

WORD_START = re.compile(r"(^|\s)(\S)")
LEADING_WSP = " \t"


def split_header_line(line: str) -> Tuple[str, str]:
    """Split a raw header line into its name and value.

    The value loses the whitespace that follows the colon; folding sequences
    inside it are kept.
    """
    name, colon, value = line.partition(":")
    if not colon:
        raise MalformedLineError('Header must match with the format "name:value"')
    if not is_valid_name(name):
        raise InvalidNameError("Invalid header name detected")
    if not is_valid_value(value):
        raise InvalidValueError("Invalid header value detected")
    return name, value.lstrip(LEADING_WSP)


def normalize_name(name: str) -> str:
    "Turn separators into dashes and capitalize each word: content_type becomes Content-Type."
    spaced = name.replace("_", " ").replace("-", " ")
    titled = WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), spaced)
    return titled.replace(" ", "-")


def stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        # undecodable bytes become lone surrogates, which can't be encoded later
        return bytes(value).decode("utf-8", errors="surrogateescape")
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    raise InvalidValueError(f"Can't use a value of type {type(value).__name__} as a header value")


class HeaderField:
    """
    A single ``Name: Value`` header field.

    The value is stored decoded. The encoding tag records whether it needs
    RFC 2047 encoding on the wire; assigning a non-printable value raises the
    tag to :attr:`Encoding.EXTENDED` and a later printable value does not lower
    it again. Use :meth:`set_encoding` to override the tag explicitly.

    Extended values are always rendered as UTF-8 encoded words, matching the
    ``"UTF-8"`` label of the tag.
    """
    max_line_length: int = MAX_LINE_LENGTH

    def __init__(self, name: Optional[str] = None, value: ScalarValueType = None) -> None:
        self._name: Optional[str] = None
        self._value: Optional[str] = None
        self._encoding = Encoding.MINIMAL
        if name:
            self.set_name(name)
        if value:
            self.set_value(value)

    @classmethod
    def from_string(cls, line: str) -> Self:
        name, value = split_header_line(line)
        decoded_value = mime_decode_value(value)
        header = cls(name, decoded_value)
        if decoded_value != value:
            header.set_encoding(Encoding.EXTENDED)
        return header

    def set_name(self, name: str) -> Self:
        if not isinstance(name, str) or not name:
            raise InvalidNameError("Header name must be a string")
        name = normalize_name(name)
        if not is_valid_name(name):
            raise InvalidNameError("Header name must be composed of printable US-ASCII characters, except colon.")
        self._name = name
        return self

    def get_name(self) -> Optional[str]:
        return self._name

    def set_value(self, value: ScalarValueType) -> Self:
        value = stringify(value)
        if not can_be_encoded(value):
            raise InvalidValueError(
                "Header value must be composed of printable US-ASCII characters and valid folding sequences."
            )
        if not is_printable(value) and self._encoding is not Encoding.EXTENDED:
            logger.debug("Header %s carries non-printable characters, switching to %s", self._name, Encoding.EXTENDED.value)
            self._encoding = Encoding.EXTENDED
        self._value = value
        return self

    def get_value(self, format: ValueFormat = ValueFormat.RAW) -> Optional[str]:
        if format is ValueFormat.ENCODED and self._value is not None:
            return wrap(self._value, self)
        return self._value

    def set_encoding(self, encoding: Union[Encoding, str]) -> Self:
        self._encoding = Encoding.from_label(encoding)
        return self

    def get_encoding(self) -> Encoding:
        return self._encoding

    def to_string(self) -> str:
        name = self.get_name()
        if not name:
            raise MissingNameError("Header name is not set, use set_name()")
        value = self.get_value(ValueFormat.ENCODED)
        if not value:
            raise MissingValueError("Header value is not set, use set_value()")
        return f"{name}: {value}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, value={self._value!r}, encoding={self._encoding.value!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, HeaderField):
            return (self._name, self._value, self._encoding) == (other._name, other._value, other._encoding)
        return NotImplemented
