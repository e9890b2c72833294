#!/usr/bin/env python3
"""
UI module initialization for the System Information Tool.
"""

from .panel import render, gauge, filled_slots
from .report import ReportGenerator
