# syslog_client/formatter.py
"""RFC 5424 datagram formatting.

Builds one syslog line of the form::

    <PRI>1 TIMESTAMP HOSTNAME APP-NAME PROCID MSGID STRUCTURED-DATA MSG

MSGID and STRUCTURED-DATA are always the NILVALUE. Nothing here performs
I/O, and identical inputs always produce identical output.
"""

import math
from datetime import datetime, timezone
from typing import Union

Timestamp = Union[datetime, int, float]

SYSLOG_VERSION = 1
NILVALUE = '-'
SP = ' '


def priority(facility: int, severity: int) -> int:
    """Calculate the PRI value. Out-of-range codes are not rejected."""
    return int(facility) * 8 + int(severity)


def format_timestamp(timestamp: Timestamp) -> str:
    """Render a point in time as YYYY-MM-DDTHH:MM:SS+00:00.

    Datetimes are converted to UTC, naive ones being taken as local time
    like datetime.astimezone() does. Numbers are POSIX epoch seconds.
    Fractional seconds are dropped. Raises ValueError for NaN, infinity or
    a point in time outside the years 1-9999.
    """
    try:
        if isinstance(timestamp, datetime):
            ts = timestamp.astimezone(timezone.utc)
        else:
            if not math.isfinite(timestamp):
                raise ValueError(f"Timestamp must be finite, got {timestamp!r}")
            ts = datetime.fromtimestamp(math.floor(timestamp), tz=timezone.utc)
    except (OverflowError, OSError) as e:
        raise ValueError(f"Timestamp out of range: {timestamp!r}") from e

    # strftime('%Y') does not pad years below 1000 on every platform
    return (
        f"{ts.year:04d}-{ts.month:02d}-{ts.day:02d}"
        f"T{ts.hour:02d}:{ts.minute:02d}:{ts.second:02d}+00:00"
    )


def format_datagram(
    facility: int,
    severity: int,
    timestamp: Timestamp,
    hostname: str,
    app_name: str,
    procid: int,
    message: str
) -> str:
    """Format a single RFC 5424 message line.

    HOSTNAME, APP-NAME and MSG are emitted verbatim. An empty message still
    leaves the separator in front of it, so the line ends with a space.
    """
    fields = [
        f"<{priority(facility, severity)}>{SYSLOG_VERSION}",
        format_timestamp(timestamp),
        hostname,
        app_name,
        str(procid),
        NILVALUE,  # MSGID
        NILVALUE,  # STRUCTURED-DATA
        message,
    ]
    return SP.join(fields)
