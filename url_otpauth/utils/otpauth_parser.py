"""
otpauth:// URI parser

Parses URIs as described in Google Authenticator's "Key Uri Format" document:

    otpauth://TYPE/[ISSUER:]ACCOUNT?secret=SECRET[&issuer=ISSUER][&digits=6|8]
        [&algorithm=SHA1|SHA256|SHA512|MD5][&period=SECONDS][&counter=INT]

Validation runs in a fixed order and stops at the first failure, so a URI
with several problems always reports the same error.
"""

import re
from urllib.parse import urlsplit, parse_qsl, unquote

from ..models.descriptor import OtpDescriptor, OtpType, Algorithm, SUPPORTED_DIGITS, DEFAULT_DIGITS
from ..models.errors import ErrorType, OtpauthInvalidURL

OTPAUTH_SCHEME = "otpauth"
LABEL_SEPARATOR = ":"

# ASCII digits only: int() alone also takes "_", "+", whitespace and non-ASCII digits
DIGITS_PATTERN = re.compile(r"[0-9]+")
COUNTER_PATTERN = re.compile(r"-?[0-9]+")


def _decode(component):
    # Invalid UTF-8 behind percent escapes is an error, not a replacement character
    return unquote(component, errors="strict")


def parse(raw_url, strict_issuer=False):
    """Parse an otpauth:// URI into an OtpDescriptor

    Args:
        raw_url (str): The URI to parse
        strict_issuer (bool): Reject URIs whose label issuer and ``issuer``
            query parameter are both set but differ

    Returns:
        OtpDescriptor: The parsed token description

    Raises:
        OtpauthInvalidURL: With ``error_type`` set to the first check that failed
    """
    def fail(error_type):
        return OtpauthInvalidURL(error_type, raw_url)

    #
    # Protocol
    #

    if not isinstance(raw_url, str):
        raise fail(ErrorType.INVALID_PROTOCOL)

    try:
        parsed = urlsplit(raw_url)
        parameters = dict(parse_qsl(parsed.query))
    except ValueError:
        raise fail(ErrorType.INVALID_PROTOCOL) from None

    if parsed.scheme != OTPAUTH_SCHEME:
        raise fail(ErrorType.INVALID_PROTOCOL)

    #
    # Type
    #

    try:
        otp_type = OtpType(_decode(parsed.netloc))
    except (ValueError, UnicodeDecodeError):
        raise fail(ErrorType.UNKNOWN_OTP) from None

    #
    # Label (contains account name, may contain issuer)
    #

    path = parsed.path[1:] if parsed.path.startswith("/") else parsed.path
    try:
        label = _decode(path)
    except UnicodeDecodeError:
        raise fail(ErrorType.INVALID_LABEL) from None

    label_components = label.split(LABEL_SEPARATOR)
    if len(label_components) == 1:
        issuer, account = "", label_components[0]
    elif len(label_components) == 2:
        issuer, account = label_components
    else:
        raise fail(ErrorType.INVALID_LABEL)

    if not account:
        raise fail(ErrorType.MISSING_ACCOUNT_NAME)

    if len(label_components) == 2 and not issuer:
        raise fail(ErrorType.INVALID_ISSUER)

    #
    # Parameters
    #

    key = parameters.get("secret")
    if not key:
        raise fail(ErrorType.MISSING_SECRET_KEY)

    query_issuer = parameters.get("issuer")
    if strict_issuer and issuer and query_issuer and query_issuer != issuer:
        raise fail(ErrorType.INVALID_ISSUER)
    issuer = issuer or query_issuer or ""

    digits = DEFAULT_DIGITS
    if "digits" in parameters:
        if not DIGITS_PATTERN.fullmatch(parameters["digits"]):
            raise fail(ErrorType.INVALID_DIGITS)
        digits = int(parameters["digits"])
        if digits not in SUPPORTED_DIGITS:
            raise fail(ErrorType.INVALID_DIGITS)

    algorithm = None
    if "algorithm" in parameters:
        # Lookup by member name keeps the match case-sensitive
        algorithm = Algorithm.__members__.get(parameters["algorithm"])
        if algorithm is None:
            raise fail(ErrorType.UNKNOWN_ALGORITHM)

    period = None
    if otp_type is OtpType.TOTP and "period" in parameters:
        try:
            period = float(parameters["period"])
        except ValueError:
            raise fail(ErrorType.INVALID_PERIOD) from None

    counter = None
    if otp_type is OtpType.HOTP:
        if "counter" not in parameters:
            raise fail(ErrorType.MISSING_COUNTER)
        if not COUNTER_PATTERN.fullmatch(parameters["counter"]):
            raise fail(ErrorType.INVALID_COUNTER)
        counter = int(parameters["counter"])

    return OtpDescriptor(
        type=otp_type,
        account=account,
        key=key,
        issuer=issuer,
        digits=digits,
        algorithm=algorithm,
        period=period,
        counter=counter,
    )
