import logging
from typing import Any, Optional

from . import base32
from .exceptions import ConfigurationError as ConfigurationError
from .exceptions import DigestTooShort as DigestTooShort
from .exceptions import InputError as InputError
from .exceptions import InvalidCharacter as InvalidCharacter
from .exceptions import InvalidPinLength as InvalidPinLength
from .exceptions import InvalidStartTime as InvalidStartTime
from .exceptions import InvalidTimeStep as InvalidTimeStep
from .exceptions import OTPError as OTPError
from .exceptions import UnsupportedAlgorithm as UnsupportedAlgorithm
from .hotp import HOTP as HOTP
from .otp import DEFAULT_DIGITS
from .otp import OTP as OTP
from .totp import DEFAULT_INTERVAL, DEFAULT_START_TIME
from .totp import TOTP as TOTP

logging.getLogger(__name__).addHandler(logging.NullHandler())


def base32_encode(data: bytes) -> str:
    return base32.encode(data)


def base32_decode(text: str) -> bytes:
    return base32.decode(text)


def totp_generate(
    secret: str,
    now_seconds: Optional[int] = None,
    start_seconds: int = DEFAULT_START_TIME,
    step_seconds: int = DEFAULT_INTERVAL,
    pin_length: int = DEFAULT_DIGITS,
    digest: Any = None,
) -> str:
    """
    One-shot TOTP.

        >>> totp_generate("GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ", now_seconds=59, pin_length=8)
        '94287082'

    :param secret: shared secret in base32 format
    :param now_seconds: Unix time to generate the PIN for, the current
        second if omitted
    :param start_seconds: Unix time step counting starts at
    :param step_seconds: seconds each PIN stays valid
    :param pin_length: number of digits, 1 to 9
    :param digest: HMAC digest, SHA1 unless given
    :returns: the zero-padded PIN
    """
    totp = TOTP(secret, digits=pin_length, digest=digest, interval=step_seconds, start_time=start_seconds)
    if now_seconds is None:
        return totp.now()
    return totp.at(now_seconds)


def hotp_generate(secret: str, counter: int, pin_length: int = DEFAULT_DIGITS, digest: Any = None) -> str:
    """
    One-shot HOTP for an explicit counter value.
    """
    return HOTP(secret, digits=pin_length, digest=digest).at(counter)
