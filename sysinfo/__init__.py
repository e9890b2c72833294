#!/usr/bin/env python3
"""
System Information Tool

A diagnostic command-line tool that reports processor, memory, disk, uptime,
power, display, process and environment information as bordered console
panels.
"""

__version__ = "1.0.0"
