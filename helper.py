import logging
import re
from html import escape

import config
from models import *

logger = logging.getLogger(__name__)

COUNT_RANGE = "A:C"
NUMBER_RANGE = "A:A"
APPEND_RANGE = "A:E"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def validate_rsvp(rsvp: Rsvp) -> Rsvp:
    """
    Checks the required fields of a submission and returns a cleaned copy.

    Raises:
        RsvpError: 400 if name or time is missing, or time is not a known slot.
    """
    name = (rsvp.name or "").strip()
    time = rsvp.time or ""

    if not name or not time:
        raise RsvpError("Name and time are required")

    if time not in config.TIME_SLOTS:
        raise RsvpError("Invalid time slot")

    return Rsvp(name=name, time=time, email=(rsvp.email or "").strip() or None)


def count_slots(rows: list[list[str]]) -> dict[str, int]:
    counts = {slot: 0 for slot in config.TIME_SLOTS}

    # erste Zeile ist der Header
    for row in rows[1:]:
        if len(row) < 3:
            continue
        time = row[2]
        if time in counts:
            counts[time] += 1

    return counts


def get_slot_counts(sheet) -> tuple[dict[str, int], bool]:
    """
    Counts the stored RSVPs per configured timeslot.

    If the sheet can't be read, every slot is reported as zero so that
    callers keep working; the second return value is True in that case.

    Args:
        sheet: A SheetClient (or anything with ``read_rows``).

    Returns:
        tuple: The counts per slot and a degraded flag.
    """
    try:
        rows = sheet.read_rows(COUNT_RANGE)
        return count_slots(rows), False
    except Exception:
        logger.exception("Error getting counts")
        return {slot: 0 for slot in config.TIME_SLOTS}, True


def parse_rsvp_number(value) -> int:
    """Leading integer of a cell value, 0 if there is none."""
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


def get_next_rsvp_number(sheet) -> int:
    """
    Next confirmation number: highest stored number plus one.

    Returns 1 for an empty sheet and also when the sheet can't be read.
    In the latter case the number may collide with an existing one.
    """
    try:
        rows = sheet.read_rows(NUMBER_RANGE)
    except Exception:
        logger.exception("Error getting RSVP number")
        return 1

    if len(rows) <= 1:
        return 1

    highest = 0
    for row in rows[1:]:
        if row:
            highest = max(highest, parse_rsvp_number(row[0]))
    return highest + 1


def format_rsvp_number(number: int) -> str:
    return str(number).zfill(3)


def check_slot_capacity(time: str, counts: dict[str, int]):
    if counts.get(time, 0) >= config.TIME_SLOTS[time]:
        raise RsvpError("This time slot is full")


def build_confirmation_html(number: str, name: str, time: str) -> str:
    return f"""
    <!DOCTYPE html>
    <html>
    <head>
        <style>
            body {{ font-family: Arial, sans-serif; margin: 0; padding: 0; background-color: #f5f5f5; }}
            .container {{ max-width: 600px; margin: 40px auto; padding: 40px; background-color: white; border: 1px solid #000; }}
            .header {{ text-align: center; font-size: 24px; font-weight: bold; margin-bottom: 20px; }}
            .number {{ font-size: 72px; font-weight: bold; text-align: center; margin: 30px 0; letter-spacing: 5px; }}
            .details {{ font-size: 16px; line-height: 1.8; }}
            .details p {{ margin: 10px 0; }}
            .footer {{ margin-top: 30px; padding-top: 20px; border-top: 1px solid #000; font-size: 14px; text-align: center; }}
        </style>
    </head>
    <body>
        <div class="container">
            <div class="header">RSVP CONFIRMED</div>
            <div class="number">{escape(number)}</div>
            <div class="details">
                <p><strong>Name:</strong> {escape(name)}</p>
                <p><strong>Time:</strong> {escape(time)}</p>
                <p><strong>Event:</strong> {escape(config.EVENT_NAME)}</p>
                <p><strong>Date:</strong> {escape(config.EVENT_DATE)}</p>
                <p><strong>Location:</strong> {escape(config.EVENT_LOCATION)}</p>
            </div>
            <div class="footer">
                Please save this confirmation email for your records.
            </div>
        </div>
    </body>
    </html>
    """
