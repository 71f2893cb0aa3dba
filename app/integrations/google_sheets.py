from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request as GoogleAuthRequest
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.core.config import settings

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
ROW_RANGE_COLUMNS = "A:C"


class SheetsSyncError(RuntimeError):
    pass


@dataclass(frozen=True)
class SheetCredentials:
    sheet_id: str
    sheet_name: str
    client_email: str
    private_key: str

    @classmethod
    def from_form(cls, sheet_id: str, sheet_name: str, client_email: str, private_key: str) -> "SheetCredentials":
        # Keys pasted from a JSON file keep their newlines escaped.
        return cls(
            sheet_id=sheet_id.strip(),
            sheet_name=sheet_name.strip(),
            client_email=client_email.strip(),
            private_key=private_key.strip().replace("\\n", "\n"),
        )

    def is_complete(self) -> bool:
        return all((self.sheet_id, self.sheet_name, self.client_email, self.private_key))


def _get_credentials(credentials: SheetCredentials):
    info = {
        "type": "service_account",
        "client_email": credentials.client_email,
        "private_key": credentials.private_key,
        "token_uri": settings.google_token_uri,
    }
    creds = service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
    # Fail fast on bad keys before any file is processed.
    creds.refresh(GoogleAuthRequest())
    return creds


class SheetWriter:
    def __init__(self, service: Any, sheet_id: str, sheet_name: str):
        self._service = service
        self.sheet_id = sheet_id
        self.sheet_name = sheet_name

    @property
    def row_range(self) -> str:
        return f"{self.sheet_name}!{ROW_RANGE_COLUMNS}"

    def append_row(self, file_name: str, summary: str, timestamp: str) -> dict[str, Any]:
        try:
            return (
                self._service.spreadsheets()
                .values()
                .append(
                    spreadsheetId=self.sheet_id,
                    range=self.row_range,
                    valueInputOption="USER_ENTERED",
                    insertDataOption="INSERT_ROWS",
                    body={"values": [[file_name, summary, timestamp]]},
                )
                .execute()
            )
        except HttpError as exc:
            raise SheetsSyncError(f"Google Sheets API error: {exc}") from exc
        except (GoogleAuthError, OSError) as exc:
            raise SheetsSyncError(f"Google Sheets request failed: {exc}") from exc


def connect_sheet(credentials: SheetCredentials) -> SheetWriter:
    try:
        creds = _get_credentials(credentials)
        service = build("sheets", "v4", credentials=creds, cache_discovery=False)
    except (GoogleAuthError, HttpError, ValueError) as exc:
        logger.warning("sheets_bootstrap_failed sheet_id=%s error=%s", credentials.sheet_id, exc)
        raise SheetsSyncError(f"Failed to initialise Google Sheets client: {exc}") from exc
    return SheetWriter(service, credentials.sheet_id, credentials.sheet_name)
