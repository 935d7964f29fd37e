"""Local system probing: OS family detection and fact collection."""

from .command import ProbeError, command_output, read_text, run_command
from .family import OSFamily, current_os_family, detect_os_family
from .report import SystemProbe, SystemReport
from .strategies import (
    BSDProbe,
    LinuxProbe,
    MacOSProbe,
    MemoryInfo,
    ProbeRegistry,
    ProbeStrategy,
    UnknownProbe,
)

__all__ = [
    "BSDProbe",
    "LinuxProbe",
    "MacOSProbe",
    "MemoryInfo",
    "OSFamily",
    "ProbeError",
    "ProbeRegistry",
    "ProbeStrategy",
    "SystemProbe",
    "SystemReport",
    "UnknownProbe",
    "command_output",
    "current_os_family",
    "detect_os_family",
    "read_text",
    "run_command",
]
