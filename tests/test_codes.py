"""Tests for facility and severity codes."""

import pytest

from syslog_client.codes import Facility, Severity


class TestFacility:
    def test_covers_full_range(self):
        assert sorted(int(f) for f in Facility) == list(range(24))

    def test_known_codes(self):
        assert Facility.KERNEL == 0
        assert Facility.SYSTEM_DAEMONS == 3
        assert Facility.FTP_DAEMON == 11
        assert Facility.LOCAL7 == 23

    @pytest.mark.parametrize("name,expected", [
        ("daemon", Facility.SYSTEM_DAEMONS),
        ("DAEMON", Facility.SYSTEM_DAEMONS),
        ("local0", Facility.LOCAL0),
        ("authpriv", Facility.SECURITY_AUTHORIZATION_PRIVATE),
        ("solaris-cron", Facility.CLOCK_DAEMON_2),
        ("system_daemons", Facility.SYSTEM_DAEMONS),
        ("3", Facility.SYSTEM_DAEMONS),
        (16, Facility.LOCAL0),
    ])
    def test_from_name(self, name, expected):
        assert Facility.from_name(name) is expected

    @pytest.mark.parametrize("name", ["nope", "24", -1, "", 3.0, None])
    def test_from_name_rejects_unknown(self, name):
        with pytest.raises(ValueError):
            Facility.from_name(name)


class TestSeverity:
    def test_range(self):
        assert [int(s) for s in Severity] == list(range(8))
        assert Severity.EMERGENCY == 0
        assert Severity.INFORMATIONAL == 6
        assert Severity.DEBUG == 7

    @pytest.mark.parametrize("name,expected", [
        ("info", Severity.INFORMATIONAL),
        ("informational", Severity.INFORMATIONAL),
        ("warn", Severity.WARNING),
        ("Err", Severity.ERROR),
        ("emerg", Severity.EMERGENCY),
        ("crit", Severity.CRITICAL),
        ("7", Severity.DEBUG),
    ])
    def test_from_name(self, name, expected):
        assert Severity.from_name(name) is expected

    def test_from_name_rejects_unknown(self):
        with pytest.raises(ValueError):
            Severity.from_name("verbose")
