from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OtpType(Enum):
    HOTP = "hotp"
    TOTP = "totp"


class Algorithm(Enum):
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"
    MD5 = "MD5"


SUPPORTED_DIGITS = frozenset({6, 8})
DEFAULT_DIGITS = 6


@dataclass(frozen=True)
class OtpDescriptor:
    """Parsed contents of an otpauth:// URI.

    ``counter`` is set for HOTP tokens only and ``period`` can only be set
    for TOTP tokens. ``algorithm`` is None when the URI didn't name one, the
    caller decides the default in that case.
    """

    type: OtpType
    account: str
    key: str
    issuer: str = ""
    digits: int = DEFAULT_DIGITS
    algorithm: Optional[Algorithm] = None
    period: Optional[float] = None
    counter: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.type, OtpType):
            raise ValueError(f"type must be an OtpType, got {self.type!r}")
        if not self.account:
            raise ValueError("account must not be empty")
        if not self.key:
            raise ValueError("key must not be empty")
        if self.digits not in SUPPORTED_DIGITS:
            raise ValueError(f"digits must be one of {sorted(SUPPORTED_DIGITS)}, got {self.digits!r}")
        if self.algorithm is not None and not isinstance(self.algorithm, Algorithm):
            raise ValueError(f"algorithm must be an Algorithm, got {self.algorithm!r}")
        if (self.counter is not None) != (self.type is OtpType.HOTP):
            raise ValueError("counter must be set for HOTP tokens and only for them")
        if self.period is not None and self.type is not OtpType.TOTP:
            raise ValueError("period is only valid for TOTP tokens")

    def to_dict(self):
        """Return a JSON-friendly dict, leaving out unset optional fields"""
        data = {
            "type": self.type.value,
            "account": self.account,
            "issuer": self.issuer,
            "key": self.key,
            "digits": self.digits,
        }
        if self.algorithm is not None:
            data["algorithm"] = self.algorithm.value
        if self.period is not None:
            data["period"] = self.period
        if self.counter is not None:
            data["counter"] = self.counter
        return data
