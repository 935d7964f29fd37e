"""Best-effort execution of external tools and pseudo-file reads."""

import logging
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

COMMAND_TIMEOUT_S = 5


class ProbeError(Exception):
    """Raised when an external probe cannot produce output."""


def run_command(args: list[str]) -> str:
    """Run a tool and return its stripped stdout.

    The tool is looked up on PATH before it is started.

    Raises:
        ProbeError: If the tool is missing, fails to start, times out,
            exits non-zero, or prints output that is not valid text.
    """
    if shutil.which(args[0]) is None:
        raise ProbeError(f"{args[0]} not found on PATH")

    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            timeout=COMMAND_TIMEOUT_S,
        )
    except (OSError, subprocess.SubprocessError) as e:
        raise ProbeError(f"{' '.join(args)} failed: {e}") from e
    except UnicodeDecodeError as e:
        raise ProbeError(f"{' '.join(args)} printed undecodable output: {e}") from e

    if result.returncode != 0:
        stderr = result.stderr.strip() if result.stderr else ""
        raise ProbeError(
            f"{' '.join(args)} exited with {result.returncode}: {stderr}"
        )
    return result.stdout.strip()


def command_output(args: list[str]) -> str:
    """Return a tool's output, or an empty string if it could not run."""
    try:
        return run_command(args)
    except ProbeError as e:
        logger.debug(f"Probe skipped: {e}")
        return ""


def tool_available(name: str) -> bool:
    """Check whether a tool is on PATH."""
    return shutil.which(name) is not None


def read_text(path: str | Path) -> str:
    """Read a small text or pseudo file, returning '' if it is unreadable."""
    try:
        return Path(path).read_text(errors="ignore")
    except OSError as e:
        logger.debug(f"Could not read {path}: {e}")
        return ""
