"""Tests for the UDP transport."""

import ipaddress
import socket

import pytest

from syslog_client.errors import (
    AddressResolutionError,
    NotOpenError,
    SendError,
    SocketAllocationError,
)
from syslog_client.transport import DEFAULT_PORT, PeerEndpoint, UDPTransport, resolve_peer


class TestResolvePeer:
    def test_literal_ipv4(self):
        peer = resolve_peer("127.0.0.1", 8514)
        assert peer == PeerEndpoint(ipaddress.IPv4Address("127.0.0.1"), 8514)
        assert peer.octets == (127, 0, 0, 1)
        assert peer.as_tuple() == ("127.0.0.1", 8514)
        assert str(peer) == "127.0.0.1:8514"

    def test_default_port(self):
        assert resolve_peer("10.0.0.1").port == DEFAULT_PORT == 514

    def test_hostname(self):
        peer = resolve_peer("localhost", 514)
        assert peer.address.is_loopback

    @pytest.mark.parametrize("host", ["", "   ", "bad..host", "a" * 300, None])
    def test_malformed_host(self, host):
        with pytest.raises(AddressResolutionError):
            resolve_peer(host, 514)

    @pytest.mark.parametrize("port", [0, -1, 65536])
    def test_bad_port(self, port):
        with pytest.raises(AddressResolutionError):
            resolve_peer("127.0.0.1", port)


class TestUDPTransport:
    def test_send_one_datagram(self, receiver, receiver_port):
        with UDPTransport() as transport:
            transport.open("127.0.0.1", receiver_port)
            assert transport.send(b"hello") == 5

            data, _ = receiver.recvfrom(65536)
            assert data == b"hello"

    def test_close_is_idempotent(self):
        transport = UDPTransport()
        transport.open("127.0.0.1", 8514)
        transport.close()
        transport.close()
        assert not transport.is_open
        assert transport.peer is None

    def test_close_without_open(self):
        UDPTransport().close()

    def test_send_before_open(self):
        with pytest.raises(NotOpenError):
            UDPTransport().send(b"x")

    def test_send_after_close(self):
        transport = UDPTransport()
        transport.open("127.0.0.1", 8514)
        transport.close()
        with pytest.raises(SendError):
            transport.send(b"x")

    def test_reopen_releases_previous_socket(self, receiver, receiver_port):
        transport = UDPTransport()
        transport.open("127.0.0.1", 8514)
        first = transport._socket

        transport.open("127.0.0.1", receiver_port)
        assert first.fileno() == -1
        assert transport.peer.port == receiver_port

        transport.send(b"second")
        data, _ = receiver.recvfrom(65536)
        assert data == b"second"
        transport.close()

    def test_failed_open_leaves_transport_closed(self):
        transport = UDPTransport()
        transport.open("127.0.0.1", 8514)

        with pytest.raises(AddressResolutionError):
            transport.open("bad..host", 514)

        assert not transport.is_open
        assert transport.peer is None

        transport.open("127.0.0.1", 8514)
        assert transport.is_open
        transport.close()

    def test_socket_allocation_failure(self, monkeypatch):
        def refuse(*args, **kwargs):
            raise OSError(24, "Too many open files")

        monkeypatch.setattr(socket, "socket", refuse)
        transport = UDPTransport()
        with pytest.raises(SocketAllocationError) as exc_info:
            transport.open("127.0.0.1", 8514)

        assert isinstance(exc_info.value.__cause__, OSError)
        assert not transport.is_open

    def test_os_send_failure_wrapped(self):
        class BrokenSocket:
            def sendto(self, data, addr):
                raise OSError(101, "Network is unreachable")

            def close(self):
                pass

        transport = UDPTransport()
        transport.open("127.0.0.1", 8514)
        transport._socket.close()
        transport._socket = BrokenSocket()

        with pytest.raises(SendError) as exc_info:
            transport.send(b"x")

        assert not isinstance(exc_info.value, NotOpenError)
        assert transport.is_open
        transport.close()
