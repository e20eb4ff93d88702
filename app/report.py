import re
import sys
import time
from datetime import datetime, timezone

import requests

from app.clockify import get_time_entries

import config

NO_DESCRIPTION = "No description"
API_ERROR_MESSAGE = "No entries found or API error."
FETCH_FAILED_MESSAGE = "Failed to fetch Clockify report."

# Outcomes of send_daily_report
NOT_READY = "not_ready"
DELIVERED = "delivered"
FAILED = "failed"


def _ticket_tag_pattern(prefix: str) -> re.Pattern:
    return re.compile(rf"^(?:\[{re.escape(prefix)}-\d+\]:\s*)+", re.IGNORECASE)


def day_range(now: datetime | None = None) -> tuple[datetime, datetime]:
    """Return (00:00:00.000, 23:59:59.999) of today in local time.

    Each bound carries its own UTC offset, which differ on DST changeover days.
    """
    now = now or datetime.now()
    start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    end = now.replace(hour=23, minute=59, second=59, microsecond=999000)
    if now.tzinfo is None:
        start, end = start.astimezone(), end.astimezone()
    return start, end


def to_utc_iso(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_report_date(day: datetime) -> str:
    return day.strftime("%d/%m/%Y")


def clean_description(text: str, prefix: str | None = None) -> str:
    """Strip leading ticket tags ("[CA-12]: ") and capitalize the first letter."""
    desc = _ticket_tag_pattern(prefix or config.TICKET_PREFIX).sub("", text.strip()).strip()
    return desc[:1].upper() + desc[1:]


def normalize_description(description: str | None) -> str:
    return clean_description(description or NO_DESCRIPTION)


def _duration(entry: dict) -> str:
    interval = entry.get("timeInterval")
    if isinstance(interval, dict):
        return interval.get("duration") or "PT0S"
    return "PT0S"


def dedupe_entries(entries: list[dict]) -> list[dict]:
    """Normalize descriptions and keep only the first entry for each one."""
    unique = []
    seen = set()
    for e in entries:
        desc = normalize_description(e.get("description"))
        if desc in seen:
            continue
        seen.add(desc)
        unique.append(
            {
                "description": desc,
                "duration": _duration(e),
            }
        )
    return unique


def render_report(day: datetime, entries: list[dict]) -> str:
    report = f"Daily Report for {format_report_date(day)}:\n\n"
    for i, e in enumerate(entries, 1):
        report += f"{i}) {e['description']}\n"
    return report


def get_daily_report(now: datetime | None = None) -> str:
    """Fetch today's Clockify entries and format them as a numbered report.

    Upstream problems never raise: they come back as a fixed failure message
    so there is always something to send.
    """
    start, end = day_range(now)
    start_iso, end_iso = to_utc_iso(start), to_utc_iso(end)

    print(f"Fetching report for: {format_report_date(start)}")
    print(f"Date range: {start_iso} to {end_iso}")

    try:
        entries = get_time_entries(start_iso, end_iso)
        if not isinstance(entries, list):
            print(f"  [clockify] Clockify API returned: {entries}", file=sys.stderr)
            return API_ERROR_MESSAGE
        unique = dedupe_entries(entries)
    except (requests.RequestException, ValueError, AttributeError, TypeError) as e:
        print(f"  [clockify] Error fetching Clockify report: {e}", file=sys.stderr)
        return FETCH_FAILED_MESSAGE

    print(f"  Found {len(entries)} entries ({len(unique)} unique)")
    return render_report(start, unique)


def send_daily_report(session, target: str | None = None, delay: float | None = None) -> str:
    """Build today's report and deliver it to the configured WhatsApp chat."""
    if not session.is_ready():
        print("WhatsApp client not ready yet")
        return NOT_READY

    target = target or config.TARGET_NUMBER
    delay = config.SEND_DELAY_SECONDS if delay is None else delay

    try:
        report = get_daily_report()
        # Wait a few seconds so the WhatsApp web page is settled
        time.sleep(delay)
        sent = session.send_message(target, report)
    except Exception as e:
        print(f"  [whatsapp] Error sending WhatsApp message: {e}", file=sys.stderr)
        return FAILED

    if not sent:
        print(f"  [whatsapp] Bridge did not confirm delivery to {target}", file=sys.stderr)
        return FAILED

    print("Clockify report sent successfully!")
    return DELIVERED
