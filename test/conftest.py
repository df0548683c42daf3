import os
import time

import pytest

# Test-Umgebung setzen, bevor config importiert wird
os.environ["TIME_SLOTS"] = "18:00,19:30"
os.environ["MAX_SLOTS"] = "56"
os.environ["EMAIL_USER"] = "events@example.com"
os.environ["EMAIL_PASS"] = "secret"
os.environ["SERIALIZE_SUBMISSIONS"] = "false"

from app import app
from sheet import get_sheet

HEADER = ["Number", "Name", "Time", "Timestamp", "Email"]


class FakeSheet:
    """In-memory stand-in for SheetClient."""

    def __init__(self):
        self.rows = [list(HEADER)]
        self.fail_reads = False
        self.fail_appends = False
        self.read_delay = 0
        self.appended = []

    def fill(self, slot: str, count: int):
        """Adds ``count`` numbered rows for ``slot``."""
        for _ in range(count):
            number = len(self.rows)
            self.rows.append([number, f"Guest {number}", slot, "2025-10-01T12:00:00+00:00", ""])

    def read_rows(self, cells: str):
        if self.fail_reads:
            raise ConnectionError("sheet unreachable")
        if self.read_delay:
            time.sleep(self.read_delay)
        first, _, last = cells.partition(":")
        width = ord(last) - ord(first) + 1
        return [[str(c) for c in row[:width]] for row in self.rows]

    def append_rows(self, cells: str, rows):
        if self.fail_appends:
            raise ConnectionError("append failed")
        for row in rows:
            self.rows.append(list(row))
            self.appended.append(list(row))
        return {"updates": {"updatedRows": len(rows)}}


@pytest.fixture
def sheet():
    fake = FakeSheet()
    app.dependency_overrides[get_sheet] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def sent_mails(monkeypatch):
    sent = []

    def _send(to_email, subject, html):
        sent.append({"to": to_email, "subject": subject, "html": html})

    monkeypatch.setattr("mailer.send_html_mail", _send)
    return sent
