#!/usr/bin/env python3
"""
Report Generator for the System Information Tool.
"""

import datetime
import logging
import socket
from typing import List, Optional

from ..modules.base import CategoryReport, CollectorUnavailable, DiagnosticModule, Metric
from .panel import REPORT_WIDTH, render

logger = logging.getLogger("sysinfo.report")

BANNER_TITLE = "System Information Tool"
MARGIN = "  "


class ReportGenerator:
    """Runs every module once and assembles the console report."""

    def __init__(self, modules: List[DiagnosticModule], width: int = REPORT_WIDTH):
        self.modules = modules
        self.width = width

    def build_report(self) -> List[CategoryReport]:
        """Collect one CategoryReport per module, in module order."""
        return [self.collect(module) for module in self.modules]

    def collect(self, module: DiagnosticModule) -> CategoryReport:
        """Run a single module, substituting a placeholder if it fails."""
        logger.debug(f"Running module: {module.name}")
        try:
            metrics = module.run()
        except CollectorUnavailable as e:
            logger.info(f"{module.title} unavailable: {e.reason}")
            return CategoryReport.unavailable(module.name, module.title, e.reason)
        except Exception as e:
            logger.exception(f"Error running module {module.name}")
            return CategoryReport.unavailable(module.name, module.title, f"error: {e}")

        return CategoryReport(module.name, module.title, metrics)

    def banner(self) -> List[str]:
        """Render the header panel."""
        timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        return render(BANNER_TITLE, [
            Metric.text("Generated", timestamp),
            Metric.text("Host", self.get_hostname_static()),
        ], self.width)

    def render_lines(self, reports: Optional[List[CategoryReport]] = None) -> List[str]:
        """Render the banner and every category panel as margin-indented lines."""
        if reports is None:
            reports = self.build_report()

        blocks = [self.banner()]
        blocks.extend(render(report.title, report.metrics, self.width) for report in reports)

        lines = []
        for block in blocks:
            lines.append("")
            lines.extend(MARGIN + line for line in block)
        return lines

    def generate(self, reports: Optional[List[CategoryReport]] = None) -> str:
        """Generate the full report text."""
        return "\n".join(self.render_lines(reports))

    @staticmethod
    def get_hostname_static() -> str:
        """Static method to get system hostname."""
        try:
            return socket.gethostname() or "unknown-host"
        except OSError:
            return "unknown-host"
