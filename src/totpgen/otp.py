import hashlib
import hmac
import logging
from typing import Any

from . import base32, utils
from .exceptions import DigestTooShort, InvalidPinLength, UnsupportedAlgorithm

log = logging.getLogger(__name__)

DEFAULT_DIGITS = 6
DEFAULT_DIGEST = hashlib.sha1


def resolve_digest(digest: Any) -> Any:
    """
    Turns ``None``, an algorithm name ("sha256") or a hashlib constructor
    into something ``hmac.new`` accepts.

    :raises UnsupportedAlgorithm: if the runtime has no such digest, or it
        is an extendable-output function HMAC cannot use
    """
    if digest is None:
        return DEFAULT_DIGEST
    try:
        if isinstance(digest, str):
            name = digest.replace("-", "").lower()
            hashlib.new(name)
            resolved: Any = name
        else:
            resolved = digest
        # fails for shake_* and anything that isn't a hash at all
        hmac.new(b"", b"", resolved).digest()
    except (ValueError, TypeError) as exc:
        log.debug("rejecting HMAC digest %r: %s", digest, exc)
        raise UnsupportedAlgorithm(digest) from exc
    return resolved


class OTP(object):
    """
    Base class for OTP handlers.

    Holds configuration only; every call to :meth:`generate_otp` builds its
    own HMAC object, so an instance can be shared between threads.
    """

    def __init__(
        self,
        s: str,
        digits: int = DEFAULT_DIGITS,
        digest: Any = None,
    ) -> None:
        """
        :param s: secret in base32 format
        :param digits: number of digits in the OTP, 1 to 9
        :param digest: digest to use in the HMAC, SHA1 unless given
        """
        if isinstance(digits, bool) or not isinstance(digits, int) or not 1 <= digits <= utils.MAX_DIGITS:
            raise InvalidPinLength(digits)
        self.digits = digits
        self.digest = resolve_digest(digest)
        self.secret = s

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        """
        challenge = utils.int_to_bytestring(input)
        hmac_hash = hmac.new(self.byte_secret(), challenge, self.digest).digest()
        return utils.format_pin(self.truncate(hmac_hash) % utils.DIGITS_POWER[self.digits], self.digits)

    @staticmethod
    def truncate(hmac_hash: bytes) -> int:
        """
        RFC 4226 dynamic truncation: the low nibble of the last byte picks
        where four bytes are read, and the sign bit of those is dropped.
        """
        offset = hmac_hash[-1] & 0xF
        if offset + 4 > len(hmac_hash):
            log.debug("digest of %d bytes too short for truncation offset %d", len(hmac_hash), offset)
            raise DigestTooShort(offset, len(hmac_hash))
        return int.from_bytes(hmac_hash[offset : offset + 4], "big") & 0x7FFFFFFF

    def byte_secret(self) -> bytes:
        return base32.decode(self.secret)
