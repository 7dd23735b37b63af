from typing import Any


class OTPError(ValueError):
    """
    Base class for every error raised by totpgen.

    Subclasses ValueError so code written against plain ``ValueError``
    keeps catching them.
    """


class ConfigurationError(OTPError):
    """
    The caller asked for something the generator cannot do
    (bad PIN length, time step or digest). Fixing it means changing code,
    not input.
    """


class InputError(OTPError):
    """
    The data handed in (usually the encoded secret) is malformed.
    """


class InvalidCharacter(InputError):
    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__("Illegal character: {!r}".format(char))


class InvalidPinLength(ConfigurationError):
    def __init__(self, digits: Any) -> None:
        self.digits = digits
        super().__init__("pin length must be between 1 and 9, got {!r}".format(digits))


class InvalidTimeStep(ConfigurationError):
    def __init__(self, interval: Any) -> None:
        self.interval = interval
        super().__init__("time step must be a positive number of seconds, got {!r}".format(interval))


class UnsupportedAlgorithm(ConfigurationError):
    def __init__(self, algorithm: Any) -> None:
        self.algorithm = algorithm
        super().__init__("HMAC digest {!r} is not available".format(algorithm))


class DigestTooShort(ConfigurationError):
    def __init__(self, offset: int, digest_size: int) -> None:
        self.offset = offset
        self.digest_size = digest_size
        super().__init__(
            "dynamic truncation at offset {} needs {} bytes but the digest has only {}".format(
                offset, offset + 4, digest_size
            )
        )


class InvalidStartTime(ConfigurationError):
    def __init__(self, start_time: Any) -> None:
        self.start_time = start_time
        super().__init__("start time must be whole Unix seconds, got {!r}".format(start_time))
