from .exceptions import InvalidNameError, InvalidValueError

COLON = ord(":")
CR = ord("\r")
LF = ord("\n")
NUL = 0
HTAB = ord("\t")
SPACE = ord(" ")
WSP = {HTAB, SPACE}

PRINTABLE_CHARS = set(range(0x20, 0x7F))
NAME_CHARS = set(range(0x21, 0x7F)) - {COLON}


def is_printable(value: str) -> bool:
    "Return True if every character of value is printable US-ASCII (tab and line breaks are not)."
    return all(ord(char) in PRINTABLE_CHARS for char in value)


def is_valid_name(name: str) -> bool:
    "Return True if name is non-empty printable US-ASCII without whitespace or colon."
    if not name:
        return False
    return all(ord(char) in NAME_CHARS for char in name)


def filter_name(name: str) -> str:
    "Drop every character of name that is not allowed in a header name."
    return "".join(char for char in name if ord(char) in NAME_CHARS)


def assert_valid_name(name: str) -> None:
    if not is_valid_name(name):
        raise InvalidNameError("Header name must be composed of printable US-ASCII characters, except colon.")


def is_valid_value(value: str) -> bool:
    """Return True if value is acceptable header wire text.

    Only 7-bit characters are allowed. A CR must open a ``CR LF WSP`` folding
    sequence, and a LF may only appear inside one.
    """
    i = 0
    ln = len(value)
    while i < ln:
        code = ord(value[i])
        if code > 127 or code in (NUL, LF):
            return False
        if code == CR:
            if i + 2 >= ln:
                return False
            if ord(value[i + 1]) != LF or ord(value[i + 2]) not in WSP:
                return False
            i += 2
        i += 1
    return True


def filter_value(value: str) -> str:
    "Drop characters and line breaks that would make value invalid wire text."
    result = []
    i = 0
    ln = len(value)
    while i < ln:
        code = ord(value[i])
        if code > 127 or code in (NUL, LF):
            i += 1
            continue
        if code == CR:
            # keep folding sequences, drop any other line break
            if value[i + 1 : i + 2] == "\n" and value[i + 2 : i + 3] in ("\t", " "):
                result.append(value[i : i + 3])
                i += 3
            elif value[i + 1 : i + 2] == "\n":
                i += 2
            else:
                i += 1
            continue
        result.append(value[i])
        i += 1
    return "".join(result)


def assert_valid_value(value: str) -> None:
    if not is_valid_value(value):
        raise InvalidValueError(
            "Header value must be composed of printable US-ASCII characters and valid folding sequences."
        )
