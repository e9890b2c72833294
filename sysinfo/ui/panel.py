#!/usr/bin/env python3
"""
Panel renderer for the System Information Tool.

Turns a titled list of metrics into fixed-width, box-drawn text lines.
Percent metrics get an extra gauge line. Nothing here touches the OS or
writes output; callers print the returned lines.
"""

import math
from typing import Iterable, List

from ..modules.base import Metric
from ..utils import clamp_percent, fit, truncate

REPORT_WIDTH = 64
MIN_WIDTH = 8

TOP_LEFT, TOP_RIGHT = "┌", "┐"
BOTTOM_LEFT, BOTTOM_RIGHT = "└", "┘"
TEE_LEFT, TEE_RIGHT = "├", "┤"
HORIZONTAL, VERTICAL = "─", "│"

GAUGE_ON = "█"
GAUGE_OFF = "░"


def filled_slots(percent, slots: int) -> int:
    """Number of filled gauge slots: floor(percent * slots / 100), percent clamped to 0-100."""
    slots = max(int(slots), 0)
    return min(slots, math.floor(clamp_percent(percent) * slots / 100))


def gauge(percent, slots: int) -> str:
    """Draw a bar gauge such as `[██████░░░░]  60%`."""
    slots = max(int(slots), 0)
    filled = filled_slots(percent, slots)
    bar = GAUGE_ON * filled + GAUGE_OFF * (slots - filled)
    return f"[{bar}] {int(clamp_percent(percent)):3d}%"


def _border(left: str, right: str, width: int) -> str:
    return left + HORIZONTAL * (width - 2) + right


def _row(text: str, width: int) -> str:
    return f"{VERTICAL} {fit(text, width - 4)} {VERTICAL}"


def render(title: str, metrics: Iterable[Metric], width: int = REPORT_WIDTH) -> List[str]:
    """
    Render one category as a bordered panel.

    Args:
        title: Section title, shown upper-cased and centered
        metrics: Ordered metrics, one content line each
        width: Total line width including borders

    Returns:
        Lines of exactly `width` characters
    """
    if width < MIN_WIDTH:
        raise ValueError(f"panel width must be at least {MIN_WIDTH}, got {width}")

    inner = width - 2
    lines = [
        _border(TOP_LEFT, TOP_RIGHT, width),
        VERTICAL + truncate(title.upper(), inner).center(inner) + VERTICAL,
        _border(TEE_LEFT, TEE_RIGHT, width),
    ]

    for metric in metrics or ():
        lines.append(_row(f"{metric.label}: {metric.display()}", width))
        if metric.is_percent:
            lines.append(_row(gauge(metric.value, metric.slots), width))

    lines.append(_border(BOTTOM_LEFT, BOTTOM_RIGHT, width))
    return lines
