#!/usr/bin/env python3
"""
Allow running the tool with `python -m sysinfo`.
"""

import sys

from .main import main

sys.exit(main())
