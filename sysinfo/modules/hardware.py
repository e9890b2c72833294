#!/usr/bin/env python3
"""
Processor, memory, power and display modules.
"""

import mmap
import platform
import re
import shutil
import sys
from typing import Dict, List

import psutil

from .base import DiagnosticModule, Metric
from ..utils import format_duration

MEMORY_GAUGE_SLOTS = 30
BATTERY_GAUGE_SLOTS = 30
CPU_SAMPLE_INTERVAL = 0.2

MB = 1024 * 1024

ARCHITECTURES = {
    "amd64": "x64 (AMD64)",
    "x86_64": "x64 (AMD64)",
    "i386": "x86 (Intel)",
    "i686": "x86 (Intel)",
    "x86": "x86 (Intel)",
    "arm64": "ARM64",
    "aarch64": "ARM64",
}

RESOLUTION_RE = re.compile(r"(\d+)\s*x\s*(\d+)")


def describe_architecture(machine: str) -> str:
    """Map a machine string to a readable architecture name."""
    if not machine:
        return "Unknown"
    name = ARCHITECTURES.get(machine.lower())
    if name:
        return name
    if machine.lower().startswith("arm"):
        return "ARM"
    return machine


class CpuModule(DiagnosticModule):
    """Module for processor information."""

    def __init__(self):
        super().__init__(
            "cpu",
            "CPU Information"
        )

    def run(self) -> List[Metric]:
        metrics = [
            Metric.text("Architecture", describe_architecture(platform.machine())),
            Metric.text("Processor", platform.processor() or "Unknown"),
        ]

        physical = psutil.cpu_count(logical=False)
        logical = psutil.cpu_count(logical=True)
        if physical:
            metrics.append(Metric.integer("Physical Cores", physical))
        if logical:
            metrics.append(Metric.integer("Processors", logical))
        if not physical and not logical:
            raise self.unavailable("processor count not readable")

        try:
            freq = psutil.cpu_freq()
        except (OSError, NotImplementedError, RuntimeError):
            freq = None
        if freq and freq.current:
            metrics.append(Metric.number("Frequency", freq.current, "MHz"))
            if freq.max:
                metrics.append(Metric.number("Max Frequency", freq.max, "MHz"))

        metrics.append(Metric.integer("Page Size", mmap.PAGESIZE, "bytes"))
        metrics.append(Metric.percent("Usage", psutil.cpu_percent(interval=CPU_SAMPLE_INTERVAL)))
        return metrics


class MemoryModule(DiagnosticModule):
    """Module for physical memory and swap usage."""

    def __init__(self):
        super().__init__(
            "memory",
            "Memory Information"
        )

    def run(self) -> List[Metric]:
        try:
            vm = psutil.virtual_memory()
        except (OSError, RuntimeError) as e:
            raise self.unavailable(f"memory status not readable: {e}")

        total_mb = vm.total / MB
        avail_mb = vm.available / MB
        used_mb = total_mb - avail_mb

        metrics = [
            Metric.integer("Total RAM", round(total_mb), "MB"),
            Metric.integer("Available", round(avail_mb), "MB"),
            Metric.percent("Used", vm.percent, detail=f"{used_mb:.0f} MB",
                           slots=MEMORY_GAUGE_SLOTS),
        ]

        try:
            swap = psutil.swap_memory()
        except (OSError, RuntimeError):
            swap = None
        if swap is not None:
            if swap.total:
                metrics.append(Metric.text(
                    "Swap", f"{swap.used / MB:.0f} MB of {swap.total / MB:.0f} MB"))
            else:
                metrics.append(Metric.text("Swap", "none"))

        return metrics


class PowerModule(DiagnosticModule):
    """Module for AC and battery status."""

    def __init__(self):
        super().__init__(
            "power",
            "Power Status"
        )

    def run(self) -> List[Metric]:
        sensors_battery = getattr(psutil, "sensors_battery", None)
        if sensors_battery is None:
            raise self.unavailable("battery status not supported on this platform")

        battery = sensors_battery()
        if battery is None:
            raise self.unavailable("no battery detected")

        if battery.power_plugged is None:
            source = "Unknown"
        elif battery.power_plugged:
            source = "AC adapter"
        else:
            source = "Battery"

        if battery.secsleft == psutil.POWER_TIME_UNLIMITED:
            time_left = "Unlimited (on AC)"
        elif battery.secsleft == psutil.POWER_TIME_UNKNOWN or battery.secsleft is None:
            time_left = "Unknown"
        else:
            time_left = format_duration(battery.secsleft)

        return [
            Metric.text("Power Source", source),
            Metric.percent("Battery", battery.percent, slots=BATTERY_GAUGE_SLOTS),
            Metric.text("Time Left", time_left),
        ]


def parse_xrandr(output: str) -> List[Dict[str, str]]:
    """Extract connected outputs and their current resolution from `xrandr --query`."""
    displays = []
    for line in output.splitlines():
        parts = line.split()
        if len(parts) < 2 or parts[1] != "connected":
            continue
        resolution = None
        for part in parts[2:]:
            match = RESOLUTION_RE.match(part)
            if match:
                resolution = f"{match.group(1)}x{match.group(2)}"
                break
        displays.append({"name": parts[0], "resolution": resolution or "inactive"})
    return displays


def parse_system_profiler(output: str) -> List[Dict[str, str]]:
    """Extract displays from `system_profiler SPDisplaysDataType` output."""
    displays = []
    in_displays = False
    name = None
    for line in output.splitlines():
        stripped = line.strip()
        if stripped == "Displays:":
            in_displays = True
            continue
        if not in_displays:
            continue
        if stripped.endswith(":"):
            name = stripped[:-1]
        elif stripped.startswith("Resolution:") and name:
            value = stripped.split(":", 1)[1].strip()
            match = RESOLUTION_RE.search(value)
            displays.append({"name": name,
                             "resolution": f"{match.group(1)}x{match.group(2)}" if match else value})
            name = None
    return displays


class DisplayModule(DiagnosticModule):
    """Module for connected displays."""

    def __init__(self):
        super().__init__(
            "display",
            "Display Information"
        )

    def run(self) -> List[Metric]:
        if sys.platform.startswith("win"):
            return self._windows_displays()

        if sys.platform == "darwin":
            output = self.run_command(["system_profiler", "SPDisplaysDataType"])
            displays = parse_system_profiler(output)
        else:
            if not shutil.which("xrandr"):
                raise self.unavailable("xrandr not installed")
            output = self.run_command(["xrandr", "--query"])
            displays = parse_xrandr(output)

        if not displays:
            raise self.unavailable("no connected displays found")

        metrics = [Metric.integer("Displays", len(displays))]
        for display in displays:
            metrics.append(Metric.text(display["name"], display["resolution"]))
        return metrics

    def _windows_displays(self) -> List[Metric]:
        import ctypes

        try:
            user32 = ctypes.windll.user32
        except (AttributeError, OSError) as e:
            raise self.unavailable(f"user32 not available: {e}")

        # GetSystemMetrics indices: SM_CXSCREEN, SM_CYSCREEN, SM_CXVIRTUALSCREEN,
        # SM_CYVIRTUALSCREEN, SM_CMONITORS
        width, height = user32.GetSystemMetrics(0), user32.GetSystemMetrics(1)
        virtual_width, virtual_height = user32.GetSystemMetrics(78), user32.GetSystemMetrics(79)
        monitors = user32.GetSystemMetrics(80)
        if not monitors:
            raise self.unavailable("no connected displays found")

        return [
            Metric.integer("Displays", monitors),
            Metric.text("Primary", f"{width}x{height}"),
            Metric.text("Desktop", f"{virtual_width}x{virtual_height}"),
        ]
