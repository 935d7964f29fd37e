"""Per-OS-family fact collectors.

Each OS family has one strategy class. The strategy is picked once at
startup and every collector is called on it, so platform branching does
not leak into the rest of the program.
"""

import logging
import platform
from abc import ABC, abstractmethod
from dataclasses import dataclass

from sysfetch.config import FetchConfig

from .command import command_output, read_text, tool_available
from .family import OSFamily
from .parsers import (
    count_lines,
    count_modules,
    parse_bsd_top_used_mib,
    parse_cpuinfo_model,
    parse_hostname_ip,
    parse_ifconfig_ipv4,
    parse_int,
    parse_ip_addr_global,
    parse_lscpu_model,
    parse_meminfo,
    parse_os_release,
    parse_vm_stat,
)

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"
NOT_AVAILABLE = "N/A"
MIB = 1024 * 1024

OS_RELEASE_PATH = "/etc/os-release"
CPUINFO_PATH = "/proc/cpuinfo"
MEMINFO_PATH = "/proc/meminfo"


@dataclass(frozen=True)
class MemoryInfo:
    total_mib: int = 0
    used_mib: int = 0
    cache_mib: int | str = NOT_AVAILABLE


class ProbeStrategy(ABC):
    """Collects every report field for one OS family."""

    family: OSFamily = OSFamily.UNKNOWN

    def __init__(self, config: FetchConfig | None = None, variant: str = ""):
        self.config = config or FetchConfig()
        self.variant = variant

    @abstractmethod
    def distro(self) -> str:
        """Distribution or OS product name with version."""

    @abstractmethod
    def cpu_model(self) -> str:
        """CPU brand string, or "Unknown"."""

    @abstractmethod
    def threads(self) -> int:
        """Logical processor count, or 1."""

    @abstractmethod
    def memory(self) -> MemoryInfo:
        """Total, used and cached memory in MiB."""

    @abstractmethod
    def local_ipv4(self) -> str:
        """Primary non-loopback IPv4 address, or "N/A"."""

    def kernel(self) -> str:
        return platform.release() or UNKNOWN

    def user(self) -> str:
        """Current effective user name."""
        return command_output(["id", "-un"]) or command_output(["whoami"]) or UNKNOWN

    def shell(self) -> str:
        return self.config.shell or NOT_AVAILABLE

    def tasks(self) -> int:
        """Number of running processes."""
        return count_lines(command_output(["ps", "-A", "-o", "pid="]))

    def modules(self) -> int | str:
        """Loaded kernel module count. Only Linux reports one."""
        return NOT_AVAILABLE

    def _sysctl(self, key: str) -> str:
        return command_output(["sysctl", "-n", key])

    def _sysctl_threads(self, key: str) -> int:
        count = parse_int(self._sysctl(key), default=1)
        return count if count > 0 else 1


class LinuxProbe(ProbeStrategy):
    family = OSFamily.LINUX

    def distro(self) -> str:
        return parse_os_release(read_text(OS_RELEASE_PATH)) or "Linux (Unknown Distro)"

    def cpu_model(self) -> str:
        model = parse_lscpu_model(command_output(["lscpu"]))
        if not model:
            logger.debug("lscpu gave no model name, falling back to /proc/cpuinfo")
            model = parse_cpuinfo_model(read_text(CPUINFO_PATH))
        return model or UNKNOWN

    def threads(self) -> int:
        count = parse_int(command_output(["nproc", "--all"]), default=1)
        return count if count > 0 else 1

    def modules(self) -> int | str:
        if not tool_available("lsmod"):
            return NOT_AVAILABLE
        output = command_output(["lsmod"])
        if not output:
            return NOT_AVAILABLE
        return count_modules(output)

    def memory(self) -> MemoryInfo:
        values = parse_meminfo(read_text(MEMINFO_PATH))
        total_kb = values.get("MemTotal", 0)
        available_kb = values.get("MemAvailable")

        if available_kb is None:
            used_mib = 0
        else:
            used_mib = (total_kb - available_kb) // 1024
            if used_mib < 0:
                logger.debug(
                    f"MemAvailable ({available_kb} kB) exceeds MemTotal "
                    f"({total_kb} kB); reporting 0 MiB used"
                )
                used_mib = 0

        return MemoryInfo(
            total_mib=total_kb // 1024,
            used_mib=used_mib,
            cache_mib=values.get("Cached", 0) // 1024,
        )

    def local_ipv4(self) -> str:
        address = parse_ip_addr_global(
            command_output(["ip", "-4", "-o", "addr", "show", "scope", "global"])
        )
        if not address:
            address = parse_hostname_ip(command_output(["hostname", "-i"]))
        return address or NOT_AVAILABLE


class MacOSProbe(ProbeStrategy):
    family = OSFamily.MACOS

    def distro(self) -> str:
        parts = [
            command_output(["sw_vers", "-productName"]),
            command_output(["sw_vers", "-productVersion"]),
        ]
        return " ".join(p for p in parts if p) or "macOS"

    def cpu_model(self) -> str:
        return self._sysctl("machdep.cpu.brand_string") or UNKNOWN

    def threads(self) -> int:
        return self._sysctl_threads("hw.logicalcpu")

    def memory(self) -> MemoryInfo:
        total_bytes = parse_int(self._sysctl("hw.memsize"))

        # Approximation: inactive and compressed pages are not counted
        page_size, pages = parse_vm_stat(command_output(["vm_stat"]))
        used_pages = (
            pages.get("Pages active", 0)
            + pages.get("Pages wired down", 0)
            + pages.get("Pages speculative", 0)
        )

        return MemoryInfo(
            total_mib=max(total_bytes, 0) // MIB,
            used_mib=used_pages * page_size // MIB,
            cache_mib=NOT_AVAILABLE,
        )

    def local_ipv4(self) -> str:
        return parse_ifconfig_ipv4(command_output(["ifconfig"])) or NOT_AVAILABLE


class BSDProbe(ProbeStrategy):
    family = OSFamily.BSD

    def distro(self) -> str:
        return self.variant or UNKNOWN

    def cpu_model(self) -> str:
        return self._sysctl("hw.model") or UNKNOWN

    def threads(self) -> int:
        return self._sysctl_threads("hw.ncpu")

    def memory(self) -> MemoryInfo:
        total_bytes = parse_int(self._sysctl("hw.physmem"))
        used_mib = parse_bsd_top_used_mib(command_output(["top", "-b", "-d", "1"]))
        return MemoryInfo(
            total_mib=max(total_bytes, 0) // MIB,
            used_mib=used_mib,
            cache_mib=NOT_AVAILABLE,
        )

    def local_ipv4(self) -> str:
        return parse_ifconfig_ipv4(command_output(["ifconfig"])) or NOT_AVAILABLE


class UnknownProbe(ProbeStrategy):
    """Generic collectors for kernels we do not recognise."""

    family = OSFamily.UNKNOWN

    def distro(self) -> str:
        return platform.system() or UNKNOWN

    def cpu_model(self) -> str:
        return UNKNOWN

    def threads(self) -> int:
        return 1

    def memory(self) -> MemoryInfo:
        return MemoryInfo()

    def local_ipv4(self) -> str:
        return NOT_AVAILABLE


class ProbeRegistry:
    """Maps each OS family to its strategy class."""

    _strategies: dict[OSFamily, type[ProbeStrategy]] = {}

    @classmethod
    def register(cls, strategy_class: type[ProbeStrategy]) -> None:
        cls._strategies[strategy_class.family] = strategy_class

    @classmethod
    def get(cls, family: OSFamily) -> type[ProbeStrategy]:
        """Get the strategy class for a family, defaulting to UnknownProbe."""
        return cls._strategies.get(family, UnknownProbe)

    @classmethod
    def for_family(
        cls,
        family: OSFamily,
        variant: str = "",
        config: FetchConfig | None = None,
    ) -> ProbeStrategy:
        """Instantiate the strategy for a detected family."""
        return cls.get(family)(config=config, variant=variant)


for _strategy in (LinuxProbe, MacOSProbe, BSDProbe, UnknownProbe):
    ProbeRegistry.register(_strategy)
