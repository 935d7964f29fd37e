"""Banner rendering: ASCII-art computer beside the collected facts."""

from rich.console import Console
from rich.text import Text

from sysfetch.probe.report import SystemReport

ART_STYLE = "bold cyan"
LABEL_STYLE = "bold magenta"
GAP = "  "

ART = (
    " ,----------------. ",
    " | ,------------. | ",
    " | |            | | ",
    " | | >_         | | ",
    " | |            | | ",
    " | `------------' | ",
    " `-------..-------' ",
    "    _____||_____    ",
    "  ,'  ========  `.  ",
    " /  ============  \\ ",
    " `----------------' ",
)

LABELS = (
    "Distro",
    "Kernel",
    "Memory",
    "Cache",
    "Threads",
    "Tasks",
    "Local IP",
    "Shell",
    "CPU",
    "User",
    "Modules",
)


def _mib(value: int | str) -> str:
    return f"{value} MiB" if isinstance(value, int) else str(value)


def report_fields(report: SystemReport) -> list[tuple[str, str]]:
    """Return (label, value) pairs in display order."""
    values = (
        report.distro,
        report.kernel,
        f"{report.mem_used_mib} MiB / {report.mem_total_mib} MiB",
        _mib(report.mem_cache_mib),
        str(report.threads),
        str(report.tasks),
        report.local_ipv4,
        report.shell,
        report.cpu_model,
        report.user,
        str(report.modules),
    )
    return list(zip(LABELS, values))


def banner_lines(report: SystemReport) -> list[Text]:
    """Pair each art row with one labelled field."""
    width = max(len(row) for row in ART)
    fields = report_fields(report)
    rows = max(len(ART), len(fields))

    lines = []
    for i in range(rows):
        art = ART[i] if i < len(ART) else ""
        line = Text(art.ljust(width), style=ART_STYLE)
        if i < len(fields):
            label, value = fields[i]
            line.append(GAP)
            line.append(f"{label}:", style=LABEL_STYLE)
            line.append(f" {value}")
        lines.append(line)
    return lines


def render_report(report: SystemReport, console: Console | None = None) -> None:
    """Print the banner followed by one blank line."""
    console = console or Console()
    for line in banner_lines(report):
        console.print(line, soft_wrap=True, highlight=False)
    console.print()
