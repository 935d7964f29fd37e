"""OS family detection from the kernel name."""

import platform
from enum import Enum


class OSFamily(str, Enum):
    """Coarse platform classification that selects a probe strategy."""

    LINUX = "Linux"
    MACOS = "macOS"
    BSD = "BSD"
    UNKNOWN = "Unknown"


BSD_VARIANTS = ("FreeBSD", "OpenBSD", "NetBSD")


def detect_os_family(kernel_name: str) -> tuple[OSFamily, str]:
    """Classify a kernel name (as printed by ``uname -s``).

    Returns:
        Tuple of (family, variant). The variant is the BSD flavour
        ("FreeBSD", "OpenBSD", "NetBSD") and empty for other families.
    """
    name = (kernel_name or "").strip()

    if name.startswith("Linux"):
        return OSFamily.LINUX, ""
    if name.startswith("Darwin"):
        return OSFamily.MACOS, ""
    for variant in BSD_VARIANTS:
        if name.startswith(variant):
            return OSFamily.BSD, variant

    return OSFamily.UNKNOWN, ""


def current_kernel_name() -> str:
    return platform.system()


def current_os_family() -> tuple[OSFamily, str]:
    """Detect the family of the machine we are running on."""
    return detect_os_family(current_kernel_name())
