import os
from dotenv import load_dotenv

load_dotenv()


def parse_time_slots(raw: str, default_capacity: int) -> dict[str, int]:
    """
    Parses the TIME_SLOTS setting into a mapping of slot label to capacity.

    Entries are comma separated. An entry may carry its own limit as
    ``label=capacity``, otherwise ``default_capacity`` applies.

    Example:
    - "18:00,19:30=40" -> {"18:00": 56, "19:30": 40} with default 56
    """
    slots = {}
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        label, sep, capacity = entry.partition("=")
        label = label.strip()
        slots[label] = int(capacity) if sep else default_capacity
    return slots


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes"}


# Google Sheets
GOOGLE_SHEET_ID = os.getenv("GOOGLE_SHEET_ID")
GOOGLE_SERVICE_ACCOUNT_EMAIL = os.getenv("GOOGLE_SERVICE_ACCOUNT_EMAIL")
GOOGLE_PRIVATE_KEY = (os.getenv("GOOGLE_PRIVATE_KEY") or "").replace("\\n", "\n")
SHEET_NAME = os.getenv("SHEET_NAME", "Sheet1")

# Timeslots
MAX_SLOTS = int(os.getenv("MAX_SLOTS", "56"))
TIME_SLOTS = parse_time_slots(os.getenv("TIME_SLOTS", "18:00,19:30"), MAX_SLOTS)
SERIALIZE_SUBMISSIONS = _as_bool(os.getenv("SERIALIZE_SUBMISSIONS", "false"))

# Mail
EMAIL_USER = os.getenv("EMAIL_USER")
EMAIL_PASS = os.getenv("EMAIL_PASS")
SMTP_HOST = os.getenv("SMTP_HOST", "smtp.gmail.com")
SMTP_PORT = int(os.getenv("SMTP_PORT", "465"))
EMAIL_SUBJECT = os.getenv("EMAIL_SUBJECT", "TCP LIVE-STOCK RSVP Confirmation")

# Event details for the confirmation mail
EVENT_NAME = os.getenv("EVENT_NAME", "TCP LIVE-STOCK Spring Summer 26")
EVENT_DATE = os.getenv("EVENT_DATE", "October 11th, 2025")
EVENT_LOCATION = os.getenv("EVENT_LOCATION", "45 W 29th St, New York, NY")

# Server
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
PORT = int(os.getenv("PORT", "3001"))
