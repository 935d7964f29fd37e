"""Tests for SystemReport assembly."""

from dataclasses import FrozenInstanceError, fields
from unittest.mock import patch

import pytest

from sysfetch.config import FetchConfig
from sysfetch.probe.family import OSFamily
from sysfetch.probe.report import SystemProbe, SystemReport
from sysfetch.probe.strategies import (
    LinuxProbe,
    MemoryInfo,
    ProbeStrategy,
)


class StubProbe(ProbeStrategy):
    family = OSFamily.BSD

    def distro(self):
        return "FreeBSD"

    def cpu_model(self):
        return "Intel(R) Atom(TM) C3758"

    def threads(self):
        return 8

    def memory(self):
        return MemoryInfo(total_mib=16384, used_mib=1468, cache_mib="N/A")

    def local_ipv4(self):
        return "10.0.0.5"

    def kernel(self):
        return "14.1-RELEASE"

    def user(self):
        return "root"

    def tasks(self):
        return 57


class BrokenProbe(ProbeStrategy):
    """Every collector fails in a different way."""

    family = OSFamily.MACOS

    def distro(self):
        raise RuntimeError("sw_vers exploded")

    def cpu_model(self):
        return ""

    def threads(self):
        raise ValueError("not a number")

    def memory(self):
        raise OSError("vm_stat missing")

    def local_ipv4(self):
        return None

    def kernel(self):
        raise KeyError("release")

    def user(self):
        return ""

    def shell(self):
        return ""

    def tasks(self):
        raise TimeoutError()

    def modules(self):
        raise RuntimeError()


class TestCollectWith:
    def test_values_flow_through(self):
        report = SystemProbe.collect_with(
            StubProbe(config=FetchConfig(shell="/bin/sh"), variant="FreeBSD")
        )
        assert report.os_family is OSFamily.BSD
        assert report.os_variant == "FreeBSD"
        assert report.distro == "FreeBSD"
        assert report.kernel == "14.1-RELEASE"
        assert report.cpu_model == "Intel(R) Atom(TM) C3758"
        assert report.threads == 8
        assert report.user == "root"
        assert report.shell == "/bin/sh"
        assert report.tasks == 57
        assert report.modules == "N/A"
        assert report.mem_total_mib == 16384
        assert report.mem_used_mib == 1468
        assert report.mem_cache_mib == "N/A"
        assert report.local_ipv4 == "10.0.0.5"

    def test_failures_degrade_to_sentinels(self):
        report = SystemProbe.collect_with(BrokenProbe())
        assert report.distro == "Unknown"
        assert report.kernel == "Unknown"
        assert report.cpu_model == "Unknown"
        assert report.threads == 1
        assert report.user == "Unknown"
        assert report.shell == "N/A"
        assert report.tasks == 0
        assert report.modules == "N/A"
        assert report.mem_total_mib == 0
        assert report.mem_used_mib == 0
        assert report.mem_cache_mib == "N/A"
        assert report.local_ipv4 == "N/A"

    def test_linux_memory_failure_keeps_numeric_cache(self):
        with patch.object(LinuxProbe, "memory", side_effect=OSError("no /proc")), patch(
            "sysfetch.probe.strategies.command_output", return_value=""
        ), patch("sysfetch.probe.strategies.read_text", return_value=""):
            report = SystemProbe.collect_with(LinuxProbe())
        assert report.mem_cache_mib == 0

    def test_no_field_is_ever_empty(self):
        report = SystemProbe.collect_with(BrokenProbe())
        for field in fields(SystemReport):
            value = getattr(report, field.name)
            if field.name == "os_variant":
                continue
            assert value is not None
            assert value != ""

    def test_report_is_immutable(self):
        report = SystemProbe.collect_with(StubProbe())
        with pytest.raises(FrozenInstanceError):
            report.threads = 99


class TestCollect:
    @patch("sysfetch.probe.report.current_os_family", return_value=(OSFamily.MACOS, ""))
    def test_detects_family_once(self, mock_family):
        with patch("sysfetch.probe.strategies.command_output", return_value=""):
            report = SystemProbe.collect(config=FetchConfig(shell="/bin/zsh"))
        mock_family.assert_called_once()
        assert report.os_family is OSFamily.MACOS
        assert report.shell == "/bin/zsh"
        assert report.mem_cache_mib == "N/A"

    @patch("sysfetch.probe.report.current_os_family")
    def test_explicit_family_skips_detection(self, mock_family):
        with patch("sysfetch.probe.strategies.command_output", return_value=""):
            report = SystemProbe.collect(family=OSFamily.UNKNOWN)
        mock_family.assert_not_called()
        assert report.os_family is OSFamily.UNKNOWN
        assert report.mem_total_mib == 0
        assert report.local_ipv4 == "N/A"

    def test_live_collection_never_raises(self):
        report = SystemProbe.collect()
        assert isinstance(report.threads, int)
        assert report.threads >= 1
        assert report.tasks >= 0
