# syslog_client/__init__.py
"""
Syslog Client - send RFC 5424 syslog messages over UDP.

This package formats structured log records into the RFC 5424 wire format
and sends each one as a single UDP datagram to a configured collector.
"""

__version__ = '1.0.0'

from .codes import Facility, Severity
from .formatter import format_datagram, format_timestamp, priority
from .transport import PeerEndpoint, UDPTransport, resolve_peer
from .client import SyslogClient
from .config import load_config, AppConfig
from .errors import (
    SyslogError,
    AddressResolutionError,
    SocketAllocationError,
    SendError,
    NotOpenError
)

__all__ = [
    'Facility',
    'Severity',
    'format_datagram',
    'format_timestamp',
    'priority',
    'PeerEndpoint',
    'UDPTransport',
    'resolve_peer',
    'SyslogClient',
    'load_config',
    'AppConfig',
    'SyslogError',
    'AddressResolutionError',
    'SocketAllocationError',
    'SendError',
    'NotOpenError',
]
