"""Shared fixtures for the syslog client tests."""

import socket

import pytest


@pytest.fixture
def receiver():
    """A UDP socket bound to an ephemeral localhost port."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(5.0)
    try:
        yield sock
    finally:
        sock.close()


@pytest.fixture
def receiver_port(receiver):
    return receiver.getsockname()[1]
