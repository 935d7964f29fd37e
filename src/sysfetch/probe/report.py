"""System report assembly."""

import logging
from dataclasses import dataclass
from typing import Callable, TypeVar

from sysfetch.config import FetchConfig

from .family import OSFamily, current_os_family
from .strategies import (
    NOT_AVAILABLE,
    UNKNOWN,
    MemoryInfo,
    ProbeRegistry,
    ProbeStrategy,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SystemReport:
    """Everything shown in the banner. Every field always holds a value."""

    os_family: OSFamily
    os_variant: str
    distro: str
    kernel: str
    cpu_model: str
    threads: int
    user: str
    shell: str
    tasks: int
    modules: int | str
    mem_total_mib: int
    mem_used_mib: int
    mem_cache_mib: int | str
    local_ipv4: str


def _collect(name: str, collector: Callable[[], T], fallback: T) -> T:
    """Run one collector, substituting its fallback for errors or blanks."""
    try:
        value = collector()
    except Exception as e:
        logger.debug(f"{name} collection failed: {e}")
        return fallback
    if value is None or value == "":
        return fallback
    return value


class SystemProbe:
    """Builds a SystemReport for the local machine."""

    @staticmethod
    def collect(
        config: FetchConfig | None = None,
        family: OSFamily | None = None,
        variant: str = "",
    ) -> SystemReport:
        """Detect the OS family (unless given) and collect every field."""
        if family is None:
            family, variant = current_os_family()
        logger.debug(f"OS family: {family.value} {variant}".rstrip())

        strategy = ProbeRegistry.for_family(family, variant=variant, config=config)
        return SystemProbe.collect_with(strategy)

    @staticmethod
    def collect_with(strategy: ProbeStrategy) -> SystemReport:
        """Collect every field with an already chosen strategy."""
        # Linux reports a cache figure even when it cannot be read
        if strategy.family == OSFamily.LINUX:
            memory_fallback = MemoryInfo(cache_mib=0)
        else:
            memory_fallback = MemoryInfo()
        memory = _collect("memory", strategy.memory, memory_fallback)

        return SystemReport(
            os_family=strategy.family,
            os_variant=strategy.variant,
            distro=_collect("distro", strategy.distro, UNKNOWN),
            kernel=_collect("kernel", strategy.kernel, UNKNOWN),
            cpu_model=_collect("cpu", strategy.cpu_model, UNKNOWN),
            threads=_collect("threads", strategy.threads, 1),
            user=_collect("user", strategy.user, UNKNOWN),
            shell=_collect("shell", strategy.shell, NOT_AVAILABLE),
            tasks=_collect("tasks", strategy.tasks, 0),
            modules=_collect("modules", strategy.modules, NOT_AVAILABLE),
            mem_total_mib=memory.total_mib,
            mem_used_mib=memory.used_mib,
            mem_cache_mib=memory.cache_mib,
            local_ipv4=_collect("local_ipv4", strategy.local_ipv4, NOT_AVAILABLE),
        )
