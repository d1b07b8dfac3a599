# syslog_client/client.py
"""Syslog client: fixed identity plus a UDP transport."""

import os
import socket
from datetime import datetime, timezone
from typing import Optional

from .codes import Facility, Severity
from .formatter import Timestamp, format_datagram
from .errors import SendError
from .transport import DEFAULT_PORT, PeerEndpoint, UDPTransport


class SyslogClient:
    """Format and send RFC 5424 messages to one UDP syslog peer.

    Facility, hostname, app-name and process id are fixed for the lifetime
    of the client. Each write() formats and sends exactly one datagram.

    Usage::

        with SyslogClient(Facility.SYSTEM_DAEMONS, "test.test.test", "amc") as client:
            client.open("127.0.0.1", 8514)
            client.write(Severity.INFORMATIONAL, "message")
    """

    def __init__(
        self,
        facility: Facility,
        hostname: Optional[str] = None,
        app_name: str = "syslog-client",
        procid: Optional[int] = None
    ):
        self._facility = facility
        self._hostname = hostname if hostname is not None else socket.gethostname()
        self._app_name = app_name
        self._procid = procid if procid is not None else os.getpid()
        self._transport = UDPTransport()

    @property
    def facility(self) -> Facility:
        return self._facility

    @property
    def hostname(self) -> str:
        return self._hostname

    @property
    def app_name(self) -> str:
        return self._app_name

    @property
    def procid(self) -> int:
        return self._procid

    @property
    def is_open(self) -> bool:
        return self._transport.is_open

    @property
    def peer(self) -> Optional[PeerEndpoint]:
        return self._transport.peer

    def open(self, host: str, port: int = DEFAULT_PORT) -> PeerEndpoint:
        """Bind the destination, replacing any previously opened one."""
        return self._transport.open(host, port)

    def close(self) -> None:
        """Release the socket. Safe to call repeatedly."""
        self._transport.close()

    def format(
        self,
        severity: Severity,
        message: str,
        timestamp: Optional[Timestamp] = None
    ) -> str:
        """Return the line write() would send, without sending it."""
        if timestamp is None:
            timestamp = datetime.now(timezone.utc)

        return format_datagram(
            self.facility,
            severity,
            timestamp,
            self.hostname,
            self.app_name,
            self.procid,
            message
        )

    def write(
        self,
        severity: Severity,
        message: str,
        timestamp: Optional[Timestamp] = None
    ) -> int:
        """Format one message and send it as a single datagram.

        Text is encoded as UTF-8; undecodable bytes that arrived as
        surrogate escapes (e.g. from sys.argv) are sent back as the original
        bytes. Raises NotOpenError before open() or after close(), and
        SendError when the text cannot be encoded or the OS rejects the
        datagram. The client stays usable after either.
        """
        line = self.format(severity, message, timestamp)
        try:
            data = line.encode('utf-8', 'surrogateescape')
        except UnicodeEncodeError as e:
            raise SendError(f"Cannot encode syslog message as UTF-8: {e}") from e
        return self._transport.send(data)

    def __enter__(self) -> 'SyslogClient':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self):
        transport = getattr(self, '_transport', None)
        if transport is not None:
            transport.close()

    def __repr__(self) -> str:
        return (
            f"SyslogClient(facility={self.facility!r}, hostname={self.hostname!r}, "
            f"app_name={self.app_name!r}, procid={self.procid}, peer={self.peer})"
        )
