import datetime
import logging
import time
from typing import Any, Union

from . import utils
from .exceptions import InvalidStartTime, InvalidTimeStep
from .otp import DEFAULT_DIGITS, OTP

log = logging.getLogger(__name__)

DEFAULT_INTERVAL = 30
DEFAULT_START_TIME = 0


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    def __init__(
        self,
        s: str,
        digits: int = DEFAULT_DIGITS,
        digest: Any = None,
        interval: int = DEFAULT_INTERVAL,
        start_time: int = DEFAULT_START_TIME,
    ) -> None:
        """
        :param s: secret in base32 format
        :param digits: number of integers in the OTP, 1 to 9
        :param digest: digest function to use in the HMAC (expected to be SHA1)
        :param interval: the time step in seconds; a new OTP every this many seconds
        :param start_time: Unix time the first step starts at, normally 0
        """
        super().__init__(s=s, digits=digits, digest=digest)
        if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
            log.debug("rejecting time step %r", interval)
            raise InvalidTimeStep(interval)
        if isinstance(start_time, bool) or not isinstance(start_time, int):
            log.debug("rejecting start time %r", start_time)
            raise InvalidStartTime(start_time)
        self.interval = interval
        self.start_time = start_time

    def at(self, for_time: Union[int, datetime.datetime], counter_offset: int = 0) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        Times before ``start_time`` are fine; they map to negative counters.

        :param for_time: the time to generate an OTP for
        :param counter_offset: the amount of ticks to add to the time counter
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time) + counter_offset)

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at(int(time.time()))

    def timecode(self, for_time: Union[int, datetime.datetime]) -> int:
        """
        Number of whole steps between ``start_time`` and ``for_time``,
        floored, so one second before ``start_time`` is step -1.
        """
        return utils.floor_div(utils.to_unix_seconds(for_time) - self.start_time, self.interval)
