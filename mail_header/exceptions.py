class MailHeaderException(Exception):
    "Base class for exceptions raised by mail_header"


class MalformedLineError(MailHeaderException, ValueError):
    "Class for exceptions raised when a header line has no name/value delimiter"


class InvalidNameError(MailHeaderException, ValueError):
    "Class for exceptions raised when a header name is empty or contains disallowed characters"


class InvalidValueError(MailHeaderException, ValueError):
    "Class for exceptions raised when a header value cannot be represented as wire text"


class InvalidEncodingError(MailHeaderException, ValueError):
    "Class for exceptions raised when an unknown encoding tag is requested"


class MissingNameError(MailHeaderException, RuntimeError):
    "Class for exceptions raised when rendering a header without a name"


class MissingValueError(MailHeaderException, RuntimeError):
    "Class for exceptions raised when rendering a header without a value"
