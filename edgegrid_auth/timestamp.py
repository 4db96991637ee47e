"""
Signing timestamps with a validity window.
"""

import datetime
import re
from typing import Optional, Union

from .constants import DEFAULT_VALID_FOR, TIMESTAMP_FORMAT

_DURATION_RE = re.compile(
    r'^P(?:(?P<days>\d+)D)?'
    r'(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+(?:\.\d+)?)S)?)?$'
)

Duration = Union[str, int, float, datetime.timedelta]


def parse_duration(value: Duration) -> datetime.timedelta:
    """
    Convert a validity duration to a timedelta.

    Args:
        value: ISO-8601 duration string (e.g. "PT5M"), a timedelta,
            or a number of seconds

    Returns:
        The duration as a timedelta

    Raises:
        ValueError: If the string is not a supported ISO-8601 duration
    """
    if isinstance(value, datetime.timedelta):
        return value
    if isinstance(value, (int, float)):
        return datetime.timedelta(seconds=value)

    match = _DURATION_RE.match(value.strip().upper())
    if not match or value.strip().upper() in ('P', 'PT'):
        raise ValueError(f"Invalid ISO-8601 duration: {value!r}")

    parts = match.groupdict()
    return datetime.timedelta(
        days=int(parts['days'] or 0),
        hours=int(parts['hours'] or 0),
        minutes=int(parts['minutes'] or 0),
        seconds=float(parts['seconds'] or 0),
    )


class Timestamp:
    """
    A UTC point in time rendered as ``yyyyMMddTHH:mm:ss+0000``.

    The instant keeps sub-second precision so that validity checks are exact,
    while the string form is truncated to whole seconds.
    """

    def __init__(self, when: Optional[datetime.datetime] = None,
                 valid_for: Duration = DEFAULT_VALID_FOR):
        if when is None:
            when = datetime.datetime.now(datetime.timezone.utc)
        elif when.tzinfo is None:
            when = when.replace(tzinfo=datetime.timezone.utc)
        self.when = when.astimezone(datetime.timezone.utc)
        self.valid_for = parse_duration(valid_for)

    @classmethod
    def now(cls, valid_for: Duration = DEFAULT_VALID_FOR) -> 'Timestamp':
        """Create a timestamp for the current instant."""
        return cls(valid_for=valid_for)

    @classmethod
    def parse(cls, text: str, valid_for: Duration = DEFAULT_VALID_FOR) -> 'Timestamp':
        """
        Read a timestamp received from a peer.

        Raises:
            ValueError: If the text does not match the signing format
        """
        when = datetime.datetime.strptime(text, TIMESTAMP_FORMAT)
        return cls(when.replace(tzinfo=datetime.timezone.utc), valid_for)

    def set_valid_for(self, duration: Duration) -> 'Timestamp':
        """Override the validity window."""
        self.valid_for = parse_duration(duration)
        return self

    def is_valid(self, now: Optional[datetime.datetime] = None) -> bool:
        """Check the timestamp is within the validity window of now."""
        if now is None:
            now = datetime.datetime.now(datetime.timezone.utc)
        return abs(now - self.when) <= self.valid_for

    def __str__(self) -> str:
        return self.when.strftime(TIMESTAMP_FORMAT)

    def __repr__(self) -> str:
        return f"Timestamp({str(self)!r}, valid_for={self.valid_for!r})"
