from functools import lru_cache

import httplib2
from google.oauth2.service_account import Credentials
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import build

import config

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
TOKEN_URI = "https://oauth2.googleapis.com/token"


@lru_cache(maxsize=1)
def load_credentials() -> Credentials:
    if not config.GOOGLE_SERVICE_ACCOUNT_EMAIL or not config.GOOGLE_PRIVATE_KEY:
        raise ValueError("Google service account credentials are not configured")

    return Credentials.from_service_account_info(
        {
            "type": "service_account",
            "client_email": config.GOOGLE_SERVICE_ACCOUNT_EMAIL,
            "private_key": config.GOOGLE_PRIVATE_KEY,
            "token_uri": TOKEN_URI,
        },
        scopes=SCOPES,
    )


def build_service():
    """
    Builds a Sheets service with its own HTTP transport.

    httplib2 connections must not be shared between threads, and the
    endpoints run in FastAPI's threadpool, so every call gets a fresh one.
    Only the parsed credentials are shared.
    """
    http = AuthorizedHttp(load_credentials(), http=httplib2.Http())
    return build("sheets", "v4", http=http, cache_discovery=False)


class SheetClient:
    """
    Thin wrapper around the Google Sheets values API.

    Only the two calls the RSVP flow needs are exposed: reading a range
    and appending rows to it. Ranges are given without the tab name,
    e.g. ``"A:C"``; the configured sheet name is prepended.

    The service is built inside each call, so missing or broken
    credentials raise where callers already handle sheet errors.
    """

    def __init__(self, spreadsheet_id: str, sheet_name: str, service_factory=build_service):
        self.spreadsheet_id = spreadsheet_id
        self.sheet_name = sheet_name
        self._service_factory = service_factory

    def _range(self, cells: str) -> str:
        return f"{self.sheet_name}!{cells}"

    def _values(self):
        return self._service_factory().spreadsheets().values()

    def read_rows(self, cells: str) -> list[list[str]]:
        response = self._values().get(
            spreadsheetId=self.spreadsheet_id,
            range=self._range(cells),
        ).execute()
        return response.get("values", [])

    def append_rows(self, cells: str, rows: list[list]) -> dict:
        return self._values().append(
            spreadsheetId=self.spreadsheet_id,
            range=self._range(cells),
            valueInputOption="USER_ENTERED",
            body={"values": rows},
        ).execute()


def get_sheet():
    """FastAPI dependency returning a Sheets client for this request."""
    return SheetClient(config.GOOGLE_SHEET_ID, config.SHEET_NAME)
