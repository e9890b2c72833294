#!/usr/bin/env python3
"""
Main entry point for the System Information Tool.
"""

import logging
import os
import sys

from .modules import get_all_modules
from .ui.report import MARGIN, ReportGenerator

LOG_LEVEL_ENV = "SYSINFO_LOG_LEVEL"
EXIT_PROMPT = "Press Enter to exit..."

logger = logging.getLogger("sysinfo")


def setup_logging():
    """Send log records to stderr so they stay out of the report."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr
    )


def wait_for_exit():
    """Prompt and block until one line is entered."""
    try:
        input(f"\n{MARGIN}{EXIT_PROMPT}")
    except (EOFError, KeyboardInterrupt):
        print()


def main():
    """Main function."""
    setup_logging()

    # Legacy consoles may not encode the box-drawing glyphs
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="replace")

    try:
        report_gen = ReportGenerator(get_all_modules())
        print(report_gen.generate())
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user.")
        return 0

    wait_for_exit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
