# syslog_client/codes.py
"""Syslog facility and severity codes."""

from enum import IntEnum
from typing import Dict, Union


# Conventional syslog keywords, as used in syslog.conf selectors
FACILITY_KEYWORDS: Dict[str, int] = {
    'kern': 0, 'user': 1, 'mail': 2, 'daemon': 3,
    'auth': 4, 'syslog': 5, 'lpr': 6, 'news': 7,
    'uucp': 8, 'cron': 9, 'authpriv': 10, 'ftp': 11,
    'ntp': 12, 'security': 13, 'console': 14, 'solaris-cron': 15,
    'local0': 16, 'local1': 17, 'local2': 18, 'local3': 19,
    'local4': 20, 'local5': 21, 'local6': 22, 'local7': 23
}

SEVERITY_KEYWORDS: Dict[str, int] = {
    'emergency': 0, 'emerg': 0, 'panic': 0,
    'alert': 1,
    'critical': 2, 'crit': 2,
    'error': 3, 'err': 3,
    'warning': 4, 'warn': 4,
    'notice': 5,
    'informational': 6, 'info': 6,
    'debug': 7
}


def _lookup(enum_cls, keywords: Dict[str, int], name: Union[str, int]):
    if isinstance(name, int):
        return enum_cls(name)
    if not isinstance(name, str):
        raise ValueError(f"Unknown {enum_cls.__name__.lower()}: {name!r}")

    text = name.strip()
    if text.isdigit():
        return enum_cls(int(text))

    key = text.lower()
    if key in keywords:
        return enum_cls(keywords[key])

    member = key.upper().replace('-', '_')
    if member in enum_cls.__members__:
        return enum_cls[member]

    raise ValueError(f"Unknown {enum_cls.__name__.lower()}: {name!r}")


class Facility(IntEnum):
    """Subsystem that produced a message (RFC 5424 section 6.2.1)."""

    KERNEL = 0
    USER_LEVEL = 1
    MAIL_SYSTEM = 2
    SYSTEM_DAEMONS = 3
    SECURITY_AUTHORIZATION = 4
    SYSLOG_INTERNAL = 5
    LINE_PRINTER = 6
    NETWORK_NEWS = 7
    UUCP = 8
    CLOCK_DAEMON = 9
    SECURITY_AUTHORIZATION_PRIVATE = 10
    FTP_DAEMON = 11
    NTP = 12
    LOG_AUDIT = 13
    LOG_ALERT = 14
    CLOCK_DAEMON_2 = 15
    LOCAL0 = 16
    LOCAL1 = 17
    LOCAL2 = 18
    LOCAL3 = 19
    LOCAL4 = 20
    LOCAL5 = 21
    LOCAL6 = 22
    LOCAL7 = 23

    @classmethod
    def from_name(cls, name: Union[str, int]) -> 'Facility':
        """Resolve a member name, syslog keyword or numeric code."""
        return _lookup(cls, FACILITY_KEYWORDS, name)


class Severity(IntEnum):
    """Urgency of a single message, EMERGENCY (0) to DEBUG (7)."""

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFORMATIONAL = 6
    DEBUG = 7

    @classmethod
    def from_name(cls, name: Union[str, int]) -> 'Severity':
        """Resolve a member name, syslog keyword or numeric code."""
        return _lookup(cls, SEVERITY_KEYWORDS, name)
