#!/usr/bin/env python3
"""CLI entry point: send today's report over WhatsApp once (bridge must be logged in)."""

import sys
import os

sys.path.insert(0, os.path.dirname(__file__))

from app.report import DELIVERED, send_daily_report
from app.whatsapp import WhatsAppSession

if __name__ == "__main__":
    session = WhatsAppSession()
    session.refresh_status()
    outcome = send_daily_report(session)
    sys.exit(0 if outcome == DELIVERED else 1)
