"""Parsers for the text produced by OS tools and pseudo files.

All parsers are pure: they take raw text and return a value or a
fallback, so they can be exercised without touching the host.
"""

import ipaddress
import re

LOOPBACK_IPV4 = "127.0.0.1"
DEFAULT_PAGE_SIZE = 4096

_PAGE_SIZE_RE = re.compile(r"page size of (\d+) bytes")
_BSD_ACTIVE_RE = re.compile(r"(\d+)M Active")
_BSD_WIRED_RE = re.compile(r"(\d+)M Wired")


def parse_key_value(text: str) -> dict[str, str]:
    """Parse ``KEY=value`` lines (os-release format), unquoting values."""
    data: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        data[key.strip()] = value.strip().strip('"').strip("'")
    return data


def parse_os_release(text: str) -> str:
    """Return PRETTY_NAME, else NAME, else an empty string."""
    data = parse_key_value(text)
    return data.get("PRETTY_NAME") or data.get("NAME") or ""


def parse_lscpu_model(text: str) -> str:
    for line in text.splitlines():
        # util-linux >= 2.38 indents this under "Vendor ID:"
        line = line.strip()
        if line.startswith("Model name:"):
            return line.split(":", 1)[1].lstrip()
    return ""


def parse_cpuinfo_model(text: str) -> str:
    """Return the first ``model name`` entry of /proc/cpuinfo."""
    for line in text.splitlines():
        if line.startswith("model name") and ":" in line:
            return line.split(":", 1)[1].strip()
    return ""


def parse_int(text: str, default: int = 0) -> int:
    try:
        return int(text.strip())
    except (AttributeError, ValueError):
        return default


def count_lines(text: str) -> int:
    """Count non-blank lines."""
    return sum(1 for line in text.splitlines() if line.strip())


def count_modules(lsmod_output: str) -> int:
    """Count loaded modules in ``lsmod`` output, skipping its header."""
    lines = [line for line in lsmod_output.splitlines() if line.strip()]
    if lines and lines[0].startswith("Module"):
        lines = lines[1:]
    return len(lines)


def parse_meminfo(text: str) -> dict[str, int]:
    """Parse /proc/meminfo into a mapping of key -> kB."""
    values: dict[str, int] = {}
    for line in text.splitlines():
        if ":" not in line:
            continue
        key, rest = line.split(":", 1)
        parts = rest.split()
        if not parts:
            continue
        try:
            values[key.strip()] = int(parts[0])
        except ValueError:
            continue
    return values


def parse_vm_stat(text: str) -> tuple[int, dict[str, int]]:
    """Parse macOS ``vm_stat`` output.

    Returns:
        Tuple of (page size in bytes, mapping of label -> page count).
    """
    page_size = DEFAULT_PAGE_SIZE
    pages: dict[str, int] = {}

    for line in text.splitlines():
        match = _PAGE_SIZE_RE.search(line)
        if match:
            page_size = int(match.group(1))
            continue
        if ":" not in line:
            continue
        label, value = line.split(":", 1)
        try:
            pages[label.strip()] = int(value.strip().rstrip("."))
        except ValueError:
            continue

    return page_size, pages


def parse_bsd_top_used_mib(text: str) -> int:
    """Sum the Active and Wired figures from the ``Mem:`` line of top."""
    for line in text.splitlines():
        if not line.startswith("Mem:"):
            continue
        active = _BSD_ACTIVE_RE.search(line)
        wired = _BSD_WIRED_RE.search(line)
        active_mib = int(active.group(1)) if active else 0
        wired_mib = int(wired.group(1)) if wired else 0
        return active_mib + wired_mib
    return 0


def parse_ip_addr_global(text: str) -> str:
    """Extract the first address from ``ip -4 -o addr show scope global``.

    Lines look like ``2: eth0    inet 192.168.1.5/24 brd ... scope global``.
    """
    for line in text.splitlines():
        fields = line.split()
        if "inet" not in fields:
            continue
        idx = fields.index("inet")
        if idx + 1 < len(fields):
            return fields[idx + 1].split("/", 1)[0]
    return ""


def parse_hostname_ip(text: str) -> str:
    """Return the first IPv4 address printed by ``hostname -i``."""
    for token in text.split():
        try:
            return str(ipaddress.IPv4Address(token))
        except ValueError:
            continue
    return ""


def parse_ifconfig_ipv4(text: str) -> str:
    """Return the first non-loopback IPv4 address in ``ifconfig`` output."""
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 2 or fields[0] != "inet":
            continue
        # Some ifconfig builds print "inet addr:10.0.0.2"
        address = fields[1]
        if address.startswith("addr:"):
            address = address[len("addr:"):]
        if address and address != LOOPBACK_IPV4:
            return address
    return ""
