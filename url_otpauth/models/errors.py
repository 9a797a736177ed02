from enum import IntEnum


class ErrorType(IntEnum):
    """Reasons an otpauth:// URI can be rejected.

    The numeric values are stable and may be persisted by callers.
    """
    INVALID_ISSUER = 0
    INVALID_LABEL = 1
    INVALID_PROTOCOL = 2
    MISSING_ACCOUNT_NAME = 3
    MISSING_COUNTER = 4
    MISSING_ISSUER = 5  # reserved, never raised
    MISSING_SECRET_KEY = 6
    UNKNOWN_OTP = 7
    INVALID_DIGITS = 8
    UNKNOWN_ALGORITHM = 9
    INVALID_COUNTER = 10
    INVALID_PERIOD = 11


class OtpauthInvalidURL(ValueError):
    """Raised whenever an otpauth:// URI cannot be deconstructed.

    Query the ``error_type`` attribute to get the exact reason for failure.
    ``uri`` holds the offending input when the raiser knows it.
    """

    def __init__(self, error_type, uri=None):
        self.error_type = ErrorType(error_type)
        self.uri = uri
        super().__init__(f"Given otpauth:// URL is invalid. (Error {self.error_type.name})")

    def __reduce__(self):
        return (self.__class__, (self.error_type, self.uri))
