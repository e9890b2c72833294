#!/usr/bin/env python3
"""
Fixed-width text helpers shared by the collectors and the panel renderer.
"""

ELLIPSIS = "..."


def truncate(text: str, width: int) -> str:
    """
    Shorten text to at most `width` characters.

    Text that does not fit is cut so that the result is exactly `width`
    characters long and ends in the ellipsis marker.
    """
    text = str(text)
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width <= len(ELLIPSIS):
        return text[:width]
    return text[:width - len(ELLIPSIS)] + ELLIPSIS


def fit(text: str, width: int) -> str:
    """Pad or truncate text so it occupies exactly `width` columns."""
    return truncate(text, width).ljust(max(width, 0))


def clamp_percent(percent) -> float:
    """Clamp a percentage into the 0-100 range."""
    try:
        percent = float(percent)
    except (TypeError, ValueError):
        return 0.0
    if percent != percent:  # NaN
        return 0.0
    return max(0.0, min(100.0, percent))


def format_duration(seconds: float) -> str:
    """Format a number of seconds as `Nd Nh Nm Ns`."""
    seconds = max(0, int(seconds))
    days, remainder = divmod(seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{days}d {hours}h {minutes}m {seconds}s"
