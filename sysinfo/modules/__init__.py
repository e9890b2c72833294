#!/usr/bin/env python3
"""
Module initialization - imports all information modules and provides a function to get all module instances.
"""

from .base import CategoryReport, CollectorUnavailable, DiagnosticModule, Metric

from .system import SystemIdentityModule, UptimeModule, EnvironmentModule
from .hardware import CpuModule, MemoryModule, PowerModule, DisplayModule
from .storage import DiskModule
from .process import ProcessModule


def get_all_modules():
    """Return a list of all module instances in report order."""
    return [
        SystemIdentityModule(),
        CpuModule(),
        MemoryModule(),
        DiskModule(),
        UptimeModule(),
        PowerModule(),
        DisplayModule(),
        ProcessModule(),
        EnvironmentModule()
    ]
