"""Worker-process sizing for multi-process serving."""
import os
from dataclasses import dataclass


def worker_count(cpus: int | None = None) -> int:
    """Small hosts use every core; larger ones leave headroom for the OS and database."""
    cpus = cpus or os.cpu_count() or 1
    if cpus <= 2:
        workers = cpus
    elif cpus <= 4:
        workers = cpus - 1
    elif cpus <= 8:
        workers = int(cpus * 0.75)
    else:
        workers = int(cpus * 0.6)
    return max(workers, 1)


def total_memory_mb() -> int:
    try:
        return os.sysconf("SC_PAGE_SIZE") * os.sysconf("SC_PHYS_PAGES") // (1024 * 1024)
    except (AttributeError, ValueError, OSError):
        return 0


def memory_per_worker_mb(total_mb: int, workers: int, cap_mb: int) -> int:
    """80% of physical memory split across workers, never above cap_mb."""
    if workers < 1:
        raise ValueError("workers must be at least 1")
    return min(int(total_mb * 0.8 / workers), cap_mb)


@dataclass
class ClusterPlan:
    cpus: int
    workers: int
    total_memory_mb: int
    memory_per_worker_mb: int


def plan_cluster(cpus: int | None = None, total_mb: int | None = None, cap_mb: int = 1024) -> ClusterPlan:
    cpus = cpus or os.cpu_count() or 1
    total_mb = total_memory_mb() if total_mb is None else total_mb
    workers = worker_count(cpus)
    return ClusterPlan(
        cpus=cpus,
        workers=workers,
        total_memory_mb=total_mb,
        memory_per_worker_mb=memory_per_worker_mb(total_mb, workers, cap_mb),
    )
