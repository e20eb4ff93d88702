#!/usr/bin/env python3
"""CLI entry point: print today's Clockify report without sending it."""

import sys
import os

sys.path.insert(0, os.path.dirname(__file__))

from app.report import get_daily_report

if __name__ == "__main__":
    print(get_daily_report())
