from . import charset, wrap  # noqa:F401
from .exceptions import (  # noqa:F401
    InvalidEncodingError,
    InvalidNameError,
    InvalidValueError,
    MailHeaderException,
    MalformedLineError,
    MissingNameError,
    MissingValueError,
)
from .generic import HeaderField, normalize_name, split_header_line  # noqa:F401
from .types import Encoding, HeaderInterface, ValueFormat  # noqa:F401
