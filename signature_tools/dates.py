"""
Date helpers for the signers.
"""

import datetime
from email.utils import formatdate

from dateutil import parser as date_parser

from .exceptions import InvalidTimestampError

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

# Missing date fields fall back to this instead of today
PARSE_DEFAULT = datetime.datetime(1970, 1, 1)

# RFC 822 zone names, offsets in seconds
RFC822_ZONES = {
    'UT': 0,
    'UTC': 0,
    'GMT': 0,
    'Z': 0,
    'EST': -5 * 3600,
    'EDT': -4 * 3600,
    'CST': -6 * 3600,
    'CDT': -5 * 3600,
    'MST': -7 * 3600,
    'MDT': -6 * 3600,
    'PST': -8 * 3600,
    'PDT': -7 * 3600,
}


def _resolve_zone(name, offset):
    """tzinfos callback for dateutil; unknown zone names are errors."""
    if name is not None and name.upper() in RFC822_ZONES:
        return RFC822_ZONES[name.upper()]
    if offset is not None:
        return offset
    if name is None:
        return None
    raise ValueError(f"unknown time zone {name!r}")


def default_header_date() -> str:
    """Current time as an RFC 1123 date, e.g. 'Thu, 01 Jan 1970 00:00:10 GMT'."""
    return formatdate(usegmt=True)


def parse_timestamp(value: str) -> int:
    """
    Convert a textual date into whole Unix seconds.

    Accepts RFC 1123 (with RFC 822 zone names), ISO 8601 and the other
    formats dateutil understands. Missing month, day or time fields are
    taken from 1970-01-01T00:00, never from the current date. Dates
    without a zone are taken as UTC. The instant is truncated to
    milliseconds and then rounded to the nearest second, ties going up.

    Args:
        value: Date string

    Returns:
        Unix timestamp in seconds

    Raises:
        InvalidTimestampError: If value cannot be parsed into an instant,
            or names a time zone that is not known
    """
    try:
        parsed = date_parser.parse(value, default=PARSE_DEFAULT, tzinfos=_resolve_zone)
    except (ValueError, OverflowError) as e:
        raise InvalidTimestampError(value, str(e)) from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)

    millis = (parsed - EPOCH) // datetime.timedelta(milliseconds=1)
    return (millis + 500) // 1000
