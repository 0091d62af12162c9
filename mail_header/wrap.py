"""
Transport encoding of header values.

Values that only contain printable US-ASCII travel as they are. Anything else
is carried as RFC 2047 encoded words, built and parsed with the standard
library :mod:`email.header` machinery.
"""

import itertools
import logging
import re
from email.charset import QP, Charset
from email.errors import HeaderParseError
from email.header import decode_header, make_header
from typing import Iterator, Optional

from .charset import is_valid_value
from .exceptions import InvalidValueError
from .types import Encoding, HeaderInterface

logger = logging.getLogger(__name__)

FOLDING = "\r\n "
MAX_LINE_LENGTH = 78
DEFAULT_CHARSET = "UTF-8"
UNFOLDED_LINE_LENGTH = 1000000

# an encoded word stands alone between whitespace or comment parentheses
ENCODED_WORD = re.compile(r"(?<![^\s(])=\?[^?\s]+\?[QqBb]\?[^?\s]*\?=(?![^\s)])")
FOLD = re.compile(r"\r\n(?=[ \t])")


def _header_charset(charset: str) -> Charset:
    header_charset = Charset(charset)
    header_charset.header_encoding = QP
    return header_charset


def mime_decode_value(value: str) -> str:
    """Reverse any RFC 2047 encoding of a wire value.

    The input is returned unchanged (the same object) when it holds no encoded
    word, so callers can tell whether decoding took place by comparing.
    """
    if not ENCODED_WORD.search(value):
        return value
    unfolded = FOLD.sub("", value)
    try:
        return str(make_header(decode_header(unfolded)))
    except (HeaderParseError, LookupError, UnicodeDecodeError) as e:
        logger.debug("Keeping header value %r undecoded: %s", value, e)
        return value


def _line_lengths(line_length: int, header_name: Optional[str]) -> Iterator[int]:
    if not line_length:
        yield from itertools.repeat(UNFOLDED_LINE_LENGTH)
    # "Name: " on the first line, the folding space on every other one
    yield line_length - (len(header_name) + 2 if header_name else 0)
    yield from itertools.repeat(line_length - 1)


def mime_encode_value(value: str,
                      charset: str = DEFAULT_CHARSET,
                      line_length: int = MAX_LINE_LENGTH,
                      header_name: Optional[str] = None) -> str:
    """Encode the whole of value as Q encoded words joined by folds.

    Line breaks and other control characters travel inside the words
    (``=0D=0A``), so decoding gives back the exact value.
    """
    try:
        words = _header_charset(charset).header_encode_lines(value, _line_lengths(line_length, header_name))
    except (UnicodeEncodeError, LookupError) as e:
        raise InvalidValueError(f"Header value can't be encoded as {charset}") from e
    # None or empty entries appear when not even one character fits on a line
    return FOLDING.join(word for word in words if word)


def can_be_encoded(value: str, charset: str = DEFAULT_CHARSET) -> bool:
    "Return True if value can be carried as header wire text once encoded."
    try:
        # line length 0 disables folding
        encoded = mime_encode_value(value, charset=charset, line_length=0)
    except InvalidValueError:
        return False
    return is_valid_value(encoded)


def wrap(value: str, header: HeaderInterface) -> str:
    "Return the wire form of value as it should be rendered for header."
    if Encoding.from_label(header.get_encoding()) is Encoding.MINIMAL:
        return value
    return mime_encode_value(value,
                             line_length=getattr(header, "max_line_length", MAX_LINE_LENGTH),
                             header_name=header.get_name())
