"""Parse and validate otpauth:// provisioning URIs."""

from .models.descriptor import OtpDescriptor, OtpType, Algorithm, SUPPORTED_DIGITS
from .models.errors import ErrorType, OtpauthInvalidURL
from .utils.otpauth_parser import parse

__version__ = "1.0.0"

__all__ = [
    "Algorithm",
    "ErrorType",
    "OtpDescriptor",
    "OtpType",
    "OtpauthInvalidURL",
    "SUPPORTED_DIGITS",
    "parse",
]
