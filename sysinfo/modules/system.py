#!/usr/bin/env python3
"""
System identity, uptime and environment modules.
"""

import datetime
import getpass
import os
import platform
import socket
import time
from typing import List

import psutil

from .base import DiagnosticModule, Metric
from ..utils import format_duration, truncate

ENV_VALUE_WIDTH = 40

# Looked up in this order; absent names are skipped
ENVIRONMENT_VARIABLES = (
    "USER",
    "USERNAME",
    "HOME",
    "USERPROFILE",
    "SHELL",
    "COMSPEC",
    "TERM",
    "LANG",
    "TEMP",
    "TMP",
    "PATH",
    "OS",
    "PROCESSOR_ARCHITECTURE",
    "NUMBER_OF_PROCESSORS",
)


class SystemIdentityModule(DiagnosticModule):
    """Module for host name, user and operating system details."""

    def __init__(self):
        super().__init__(
            "system_identity",
            "System Information"
        )

    def run(self) -> List[Metric]:
        uname = platform.uname()

        try:
            user = getpass.getuser()
        except (KeyError, OSError, ImportError):
            # No login name and no passwd entry, e.g. inside a container
            user = "Unknown"

        metrics = [
            Metric.text("Computer", socket.gethostname() or uname.node or "Unknown"),
            Metric.text("User", user),
            Metric.text("OS", f"{uname.system} {uname.release}".strip() or "Unknown"),
            Metric.text("Version", uname.version or "Unknown"),
            Metric.text("Machine", uname.machine or "Unknown"),
            Metric.text("Python", platform.python_version()),
            Metric.text("Home Dir", os.path.expanduser("~")),
        ]

        system_root = os.environ.get("SystemRoot") or os.environ.get("windir")
        if system_root:
            metrics.append(Metric.text("Windows Dir", system_root))
            metrics.append(Metric.text("System Dir", os.path.join(system_root, "System32")))
        return metrics


class UptimeModule(DiagnosticModule):
    """Module for boot time and uptime."""

    def __init__(self):
        super().__init__(
            "uptime",
            "Uptime"
        )

    def run(self) -> List[Metric]:
        try:
            boot_ts = psutil.boot_time()
        except (OSError, RuntimeError) as e:
            raise self.unavailable(f"boot time not readable: {e}")

        uptime_seconds = time.time() - boot_ts
        boot_time = datetime.datetime.fromtimestamp(boot_ts)

        return [
            Metric.text("Uptime", format_duration(uptime_seconds)),
            Metric.text("Boot Time", boot_time.strftime("%Y-%m-%d %H:%M:%S")),
        ]


class EnvironmentModule(DiagnosticModule):
    """Module listing a fixed set of environment variables."""

    def __init__(self, names=ENVIRONMENT_VARIABLES, environ=None):
        super().__init__(
            "environment",
            "Environment Variables"
        )
        self.names = tuple(names)
        self.environ = os.environ if environ is None else environ

    def run(self) -> List[Metric]:
        metrics = []
        for name in self.names:
            value = self.environ.get(name)
            if value is None:
                continue
            metrics.append(Metric.text(name, truncate(value, ENV_VALUE_WIDTH)))

        if not metrics:
            metrics.append(Metric.text("Variables", "none set"))
        return metrics
