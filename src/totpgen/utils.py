import calendar
import datetime
import math
import time
from typing import Union

# 10**n for every supported pin length
DIGITS_POWER = (1, 10, 100, 1000, 10000, 100000, 1000000, 10000000, 100000000, 1000000000)
MAX_DIGITS = len(DIGITS_POWER) - 1


def floor_div(numerator: int, denominator: int) -> int:
    """
    Quotient rounded toward negative infinity.

    ``floor_div(-1, 30) == -1``: a moment one second before the start
    time belongs to the step before it, not to step 0. Python's ``//``
    already floors for a positive denominator, which is the only kind a
    time step can be.
    """
    return numerator // denominator


def int_to_bytestring(i: int, padding: int = 8) -> bytes:
    """
    Turns an integer into the OATH specified bytestring (big-endian,
    two's complement), which is fed to the HMAC along with the secret.
    """
    try:
        return i.to_bytes(padding, "big", signed=True)
    except OverflowError:
        raise ValueError("counter {} does not fit in {} signed bytes".format(i, padding)) from None


def format_pin(value: int, digits: int) -> str:
    """Left-pad ``value`` with zeros to exactly ``digits`` characters."""
    return "{:0{}d}".format(value, digits)


def to_unix_seconds(for_time: Union[int, datetime.datetime]) -> int:
    """
    Whole Unix seconds for a timestamp or a datetime, floored so that
    -0.5 is second -1.

    Naive datetimes are read as local time, aware ones are converted
    through UTC.
    """
    if isinstance(for_time, datetime.datetime):
        if for_time.tzinfo is None:
            return int(time.mktime(for_time.timetuple()))
        return calendar.timegm(for_time.utctimetuple())
    return math.floor(for_time)
