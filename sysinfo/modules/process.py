#!/usr/bin/env python3
"""
Process list module.
"""

import logging
from typing import List

import psutil

from .base import DiagnosticModule, Metric

logger = logging.getLogger("sysinfo.modules.process")

PROCESS_DISPLAY_LIMIT = 10

MB = 1024 * 1024


def remaining_count(total: int, limit: int) -> int:
    """Number of processes beyond the display limit, never negative."""
    return max(total - limit, 0)


class ProcessModule(DiagnosticModule):
    """Module listing the first running processes by PID."""

    def __init__(self, limit: int = PROCESS_DISPLAY_LIMIT):
        super().__init__(
            "processes",
            "Process List"
        )
        self.limit = limit

    def run(self) -> List[Metric]:
        try:
            pids = sorted(psutil.pids())
        except (OSError, psutil.Error) as e:
            raise self.unavailable(f"process table not readable: {e}")

        entries = []
        for pid in pids:
            if len(entries) >= self.limit:
                break
            entry = self._describe(pid)
            if entry is not None:
                entries.append(entry)

        metrics = [Metric.integer("Total Processes", len(pids))]
        metrics.extend(entries)

        more = remaining_count(len(pids), self.limit)
        if more:
            metrics.append(Metric.text("More", f"and {more} more processes"))
        return metrics

    def _describe(self, pid: int):
        """Return a metric for one process, or None if it cannot be read."""
        try:
            proc = psutil.Process(pid)
            with proc.oneshot():
                name = proc.name() or "?"
                try:
                    rss_mb = proc.memory_info().rss / MB
                except psutil.AccessDenied:
                    rss_mb = None
        except (psutil.NoSuchProcess, psutil.ZombieProcess, psutil.AccessDenied) as e:
            logger.debug(f"Skipping process {pid}: {e}")
            return None

        value = name if rss_mb is None else f"{name} ({rss_mb:.1f} MB)"
        return Metric.text(f"PID {pid}", value)
