import enum
from decimal import Decimal
from typing import Any, Optional, Protocol, Union, runtime_checkable

from .exceptions import InvalidEncodingError


class Encoding(str, enum.Enum):
    MINIMAL = "ASCII"
    EXTENDED = "UTF-8"

    @classmethod
    def from_label(cls, label: Union["Encoding", str]) -> "Encoding":
        if isinstance(label, cls):
            return label
        if isinstance(label, str):
            for member in cls:
                if member.value.lower() == label.lower():
                    return member
        raise InvalidEncodingError(f"Unknown header encoding {label!r}; expected one of "
                                   f"{', '.join(m.value for m in cls)}")


class ValueFormat(enum.Enum):
    RAW = "raw"
    ENCODED = "encoded"


@runtime_checkable
class HeaderInterface(Protocol):
    """Capabilities shared by every header variant.

    Address lists, dates and parameterized headers provide the same surface as
    :class:`~mail_header.generic.HeaderField`, so a message assembly layer can
    hold any of them without knowing which one it has.
    """

    @classmethod
    def from_string(cls, line: str) -> Any:
        ...

    def get_name(self) -> Optional[str]:
        ...

    def get_value(self, format: ValueFormat = ValueFormat.RAW) -> Optional[str]:
        ...

    def get_encoding(self) -> Encoding:
        ...

    def to_string(self) -> str:
        ...


ScalarValueType = Union[str, bytes, bytearray, int, float, Decimal, bool, None]
