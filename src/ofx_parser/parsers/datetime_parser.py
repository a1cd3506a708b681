"""
OFX datetime parsing.

Accepted layouts:
- YYYYMMDD
- YYYYMMDDHHMMSS
- YYYYMMDDHHMMSS.XXX
- any of the above followed by [gmt offset:tz name], e.g. [-5:EST]

Milliseconds are parsed but dropped from the result.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
import re

from ofx_parser.exceptions import InvalidDateFormat

_OFX_DATETIME = re.compile(
    r'^(?P<year>\d{4})(?P<month>\d{2})(?P<day>\d{2})'
    r'(?:(?P<hour>\d{2})(?P<minute>\d{2})(?P<second>\d{2})(?:\.(?P<fraction>\d+))?)?'
    r'(?:\[(?P<offset>[+-]?\d+(?:\.\d+)?)(?::(?P<tzname>[A-Za-z]*))?\])?$'
)


def parse_datetime(value: str) -> datetime:
    """
    Parse an OFX datetime string.

    Args:
        value: Datetime text as read from the document

    Returns:
        datetime at midnight when no time is given; timezone-aware with a
        fixed offset when a [offset:tzname] suffix is present, naive
        otherwise

    Raises:
        InvalidDateFormat: If the text matches none of the layouts or holds
            an impossible date/time

    Example:
        >>> parse_datetime('20090715120000.000[-5:EST]')
        datetime.datetime(2009, 7, 15, 12, 0, tzinfo=datetime.timezone(datetime.timedelta(days=-1, seconds=68400), 'EST'))
    """
    if not isinstance(value, str):
        raise InvalidDateFormat(repr(value))

    match = _OFX_DATETIME.match(value.strip())
    if match is None:
        raise InvalidDateFormat(value)

    parts = match.groupdict()
    tzinfo = None
    if parts['offset'] is not None:
        # Fractional offsets are decimal hours: -3.5 is -03:30
        minutes = Decimal(parts['offset']) * 60
        try:
            if parts['tzname']:
                tzinfo = timezone(timedelta(minutes=int(minutes)), parts['tzname'])
            else:
                tzinfo = timezone(timedelta(minutes=int(minutes)))
        except ValueError as e:
            raise InvalidDateFormat(value) from e

    try:
        return datetime(
            int(parts['year']),
            int(parts['month']),
            int(parts['day']),
            int(parts['hour'] or 0),
            int(parts['minute'] or 0),
            int(parts['second'] or 0),
            tzinfo=tzinfo,
        )
    except ValueError as e:
        raise InvalidDateFormat(value) from e
