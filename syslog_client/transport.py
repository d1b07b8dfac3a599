# syslog_client/transport.py
"""UDP transport owning one socket and one peer endpoint."""

import ipaddress
import logging
import socket
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import (
    AddressResolutionError,
    NotOpenError,
    SendError,
    SocketAllocationError,
)

logger = logging.getLogger(__name__)

DEFAULT_PORT = 514


@dataclass(frozen=True)
class PeerEndpoint:
    """Resolved IPv4 destination of every datagram."""
    address: ipaddress.IPv4Address
    port: int = DEFAULT_PORT

    @property
    def octets(self) -> Tuple[int, int, int, int]:
        return tuple(self.address.packed)

    def as_tuple(self) -> Tuple[str, int]:
        """Address pair in the form socket.sendto() expects."""
        return str(self.address), self.port

    def __str__(self) -> str:
        return f"{self.address}:{self.port}"


def resolve_peer(host: str, port: int = DEFAULT_PORT) -> PeerEndpoint:
    """Resolve a hostname or dotted-quad literal to a PeerEndpoint."""
    if not isinstance(host, str) or not host.strip():
        raise AddressResolutionError(f"Invalid syslog peer host: {host!r}")
    if not isinstance(port, int) or not 0 < port <= 65535:
        raise AddressResolutionError(f"Invalid UDP port: {port!r}")

    try:
        return PeerEndpoint(ipaddress.IPv4Address(host), port)
    except ValueError:
        pass

    try:
        infos = socket.getaddrinfo(host, port, socket.AF_INET, socket.SOCK_DGRAM)
    except (socket.gaierror, UnicodeError, TypeError, ValueError) as e:
        raise AddressResolutionError(f"Cannot resolve syslog peer {host!r}: {e}") from e

    if not infos:
        raise AddressResolutionError(f"No IPv4 address for syslog peer {host!r}")

    sockaddr = infos[0][4]
    return PeerEndpoint(ipaddress.IPv4Address(sockaddr[0]), port)


class UDPTransport:
    """Send datagrams to a single syslog peer over UDP.

    State goes Closed -> Open -> Closed; calling open() while open closes
    the current socket first. Not thread-safe: give each thread its own
    transport or guard it with a lock.
    """

    def __init__(self):
        self._socket: Optional[socket.socket] = None
        self._peer: Optional[PeerEndpoint] = None

    @property
    def is_open(self) -> bool:
        return self._socket is not None

    @property
    def peer(self) -> Optional[PeerEndpoint]:
        return self._peer

    def open(self, host: str, port: int = DEFAULT_PORT) -> PeerEndpoint:
        """Resolve the peer and allocate a fresh UDP socket."""
        self.close()

        peer = resolve_peer(host, port)
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        except OSError as e:
            raise SocketAllocationError(f"Cannot allocate UDP socket: {e}") from e

        self._socket = sock
        self._peer = peer
        logger.info(f"UDP syslog transport opened: {peer}")
        return peer

    def close(self) -> None:
        """Release the socket. Does nothing when already closed."""
        if self._socket is None:
            return

        sock, self._socket = self._socket, None
        self._peer = None
        sock.close()
        logger.debug("UDP syslog transport closed")

    def send(self, data: bytes) -> int:
        """Send data as one datagram and return the number of bytes sent."""
        if self._socket is None:
            raise NotOpenError("UDP transport is not open; call open() first")

        try:
            sent = self._socket.sendto(data, self._peer.as_tuple())
        except OSError as e:
            raise SendError(f"UDP send to {self._peer} failed: {e}") from e

        logger.debug(f"Sent {sent} bytes to {self._peer}")
        return sent

    def __enter__(self) -> 'UDPTransport':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
