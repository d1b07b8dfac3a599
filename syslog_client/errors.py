# syslog_client/errors.py
"""Exceptions raised by the syslog client."""


class SyslogError(Exception):
    """Base class for all syslog client errors."""


class AddressResolutionError(SyslogError):
    """Peer host text could not be resolved to an IPv4 address."""


class SocketAllocationError(SyslogError):
    """The OS refused to allocate a UDP socket."""


class SendError(SyslogError):
    """A datagram could not be handed to the network stack."""


class NotOpenError(SendError):
    """send() or write() was called without an open socket."""
