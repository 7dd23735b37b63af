"""
Case-insensitive Base32 (RFC 4648 alphabet) for OTP secrets.

Unlike :func:`base64.b32decode` this accepts the forms people actually type:
lowercase, ``-`` or space separators, missing or trailing ``=`` padding.
Encoding never emits padding.
"""
import base64

from .exceptions import InvalidCharacter

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
SEPARATORS = ("-", " ")

# bits per symbol
_SHIFT = 5
# both cases, so nothing outside ASCII is folded into the alphabet
_CHAR_MAP = {c: i for i, c in enumerate(ALPHABET)}
_CHAR_MAP.update({c.lower(): i for i, c in enumerate(ALPHABET)})

# 8 * length must stay well inside a signed 32-bit int
MAX_ENCODE_LENGTH = 1 << 28


def _clean(text: str) -> str:
    text = text.strip()
    for sep in SEPARATORS:
        text = text.replace(sep, "")
    return text.rstrip("=")


def decode(text: str) -> bytes:
    """
    Decode a Base32 secret into raw bytes.

    Bits left over after the last full byte are dropped, so ``"7" * 16``
    and ``"7" * 17`` decode to the same 10 bytes.

    :param text: encoded secret, e.g. ``"jbsw-y3dp ehpk-3pxp"``
    :raises InvalidCharacter: for anything outside ``A-Z2-7`` once
        separators and padding are removed
    :returns: decoded bytes, empty for an empty string
    """
    encoded = _clean(text)
    if not encoded:
        return b""

    result = bytearray()
    buffer = 0
    bits_left = 0
    for char in encoded:
        try:
            value = _CHAR_MAP[char]
        except KeyError:
            raise InvalidCharacter(char) from None
        buffer = (buffer << _SHIFT) | value
        bits_left += _SHIFT
        if bits_left >= 8:
            result.append((buffer >> (bits_left - 8)) & 0xFF)
            bits_left -= 8
            # keep only the bits not yet emitted
            buffer &= (1 << bits_left) - 1
    return bytes(result)


def encode(data: bytes) -> str:
    """
    Encode bytes as unpadded Base32.

    The last symbol is filled up with zero bits; the output is
    ``ceil(8 * len(data) / 5)`` characters long.

    :param data: any bytes-like object, anything else raises TypeError
    :returns: encoded text
    """
    data = bytes(memoryview(data))
    if not data:
        return ""
    if len(data) >= MAX_ENCODE_LENGTH:
        raise ValueError("input of {} bytes is too long to encode".format(len(data)))

    return base64.b32encode(data).decode("ascii").rstrip("=")
