#!/usr/bin/env python3
"""
Base types shared by all information modules.
"""

import logging
import subprocess
from typing import Any, List, NamedTuple, Optional

from ..utils import clamp_percent

logger = logging.getLogger("sysinfo.modules")

COMMAND_TIMEOUT = 10
DEFAULT_GAUGE_SLOTS = 30

INTEGER = "integer"
FLOAT = "float"
PERCENT = "percent"
TEXT = "text"


class CollectorUnavailable(Exception):
    """Raised when the facts for a category cannot be collected."""

    def __init__(self, category: str, reason: str = "not supported on this platform"):
        super().__init__(f"{category}: {reason}")
        self.category = category
        self.reason = reason


class Metric(NamedTuple):
    """A single labelled fact within a category."""

    label: str
    value: Any
    kind: str = TEXT
    unit: str = ""
    detail: str = ""
    slots: int = DEFAULT_GAUGE_SLOTS

    @classmethod
    def integer(cls, label: str, value: int, unit: str = "") -> "Metric":
        return cls(label, int(value), INTEGER, unit=unit)

    @classmethod
    def number(cls, label: str, value: float, unit: str = "") -> "Metric":
        return cls(label, float(value), FLOAT, unit=unit)

    @classmethod
    def percent(cls, label: str, value: float, detail: str = "",
                slots: int = DEFAULT_GAUGE_SLOTS) -> "Metric":
        return cls(label, value, PERCENT, detail=detail, slots=slots)

    @classmethod
    def text(cls, label: str, value: Any) -> "Metric":
        return cls(label, "" if value is None else str(value), TEXT)

    @property
    def is_percent(self) -> bool:
        return self.kind == PERCENT

    def display(self) -> str:
        """Return the value formatted for a report line."""
        if self.kind == INTEGER:
            text = str(self.value)
        elif self.kind == FLOAT:
            text = f"{self.value:.1f}"
        elif self.kind == PERCENT:
            pct = int(clamp_percent(self.value))
            return f"{self.detail} ({pct}%)" if self.detail else f"{pct}%"
        else:
            return str(self.value)
        return f"{text} {self.unit}" if self.unit else text


class CategoryReport:
    """An ordered set of metrics rendered under one section title."""

    def __init__(self, name: str, title: str, metrics: Optional[List[Metric]] = None,
                 available: bool = True):
        self.name = name
        self.title = title
        self.metrics = list(metrics or [])
        self.available = available

    @classmethod
    def unavailable(cls, name: str, title: str, reason: str) -> "CategoryReport":
        """Build the placeholder shown when a collector fails."""
        return cls(name, title, [Metric.text("Status", f"unavailable ({reason})")],
                   available=False)

    def __repr__(self):
        return f"CategoryReport({self.name!r}, {len(self.metrics)} metrics)"


class DiagnosticModule:
    """Base class for all information modules."""

    def __init__(self, name: str, title: str):
        self.name = name
        self.title = title

    def run(self) -> List[Metric]:
        """Collect the facts for this category."""
        raise NotImplementedError("Subclasses must implement this method")

    def unavailable(self, reason: str) -> CollectorUnavailable:
        return CollectorUnavailable(self.name, reason)

    def run_command(self, command: List[str], timeout: int = COMMAND_TIMEOUT) -> str:
        """
        Run a command and return its standard output.

        Args:
            command: Command to run as a list of strings
            timeout: Seconds to wait before giving up

        Raises:
            CollectorUnavailable: if the command is missing, times out or fails
        """
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=False,
                timeout=timeout
            )
        except FileNotFoundError:
            raise self.unavailable(f"{command[0]} not found")
        except subprocess.TimeoutExpired:
            raise self.unavailable(f"{command[0]} timed out after {timeout} seconds")
        except OSError as e:
            raise self.unavailable(f"failed to run {command[0]}: {e}")

        if result.returncode != 0:
            logger.debug(f"{command[0]} exited with {result.returncode}: {result.stderr.strip()}")
            raise self.unavailable(f"{command[0]} exited with status {result.returncode}")
        return result.stdout
