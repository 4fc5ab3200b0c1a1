"""iCalendar (.ics) serializer for calendar entries"""

import uuid
from datetime import date
from typing import Callable, Iterable, List, Optional

from life_mapper.domain.models import CalendarEntry

CRLF = "\r\n"
EVENT_TIME = "T090000Z"


def ics_escape(text: str) -> str:
    """Escape TEXT values per RFC 5545 (backslash, comma, semicolon, newline)"""
    return (
        text.replace("\\", "\\\\")
        .replace(",", "\\,")
        .replace(";", "\\;")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def ics_datetime(day: date) -> str:
    """All events are stamped at 09:00 UTC on their day"""
    return day.strftime("%Y%m%d") + EVENT_TIME


def build_ics(
    entries: Iterable[CalendarEntry],
    prodid: str,
    stamp_date: date,
    uid_factory: Optional[Callable[[], str]] = None,
) -> str:
    """
    Render entries as a VCALENDAR document.

    One VEVENT per entry with a unique UID, DTSTAMP of stamp_date, DTSTART of
    the entry date, escaped SUMMARY and optional DESCRIPTION. Lines are
    CRLF-joined as the format requires.
    """
    uid_factory = uid_factory or (lambda: str(uuid.uuid4()))

    lines: List[str] = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{prodid}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
    ]

    for entry in entries:
        lines.append("BEGIN:VEVENT")
        lines.append(f"UID:{uid_factory()}@lifemapper")
        lines.append(f"DTSTAMP:{ics_datetime(stamp_date)}")
        lines.append(f"DTSTART:{ics_datetime(entry.date)}")
        lines.append(f"SUMMARY:{ics_escape(entry.label)}")
        if entry.description:
            lines.append(f"DESCRIPTION:{ics_escape(entry.description)}")
        lines.append("END:VEVENT")

    lines.append("END:VCALENDAR")
    return CRLF.join(lines)
