"""Google Sheets REST adapter for the reference lists and the expense ledger."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import google.auth.transport.requests
import httpx
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account

from expense_bot.config import Settings
from expense_bot.errors import AppendError, ReferenceFetchError

logger = logging.getLogger(__name__)

SHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets"


@dataclass(frozen=True)
class ReferenceColumns:
    """Raw column values as returned by the spreadsheet, not yet normalized."""

    categories: list[Any]
    spenders: list[Any]
    cards: list[Any]


class ReferenceSource(Protocol):
    """Read side of the spreadsheet used by the reference cache."""

    async def fetch_reference_columns(self) -> ReferenceColumns:
        ...


class Ledger(Protocol):
    """Write side of the spreadsheet used by the record appender."""

    async def append_row(self, row: list[Any]) -> None:
        ...


class SheetsClient:
    """Async Sheets v4 client authenticated with a service account."""

    def __init__(
        self,
        *,
        spreadsheet_id: str,
        credentials: Any,
        http_client: httpx.AsyncClient,
        reference_sheet: str = "Категории",
        ledger_sheet: str = "Расходы",
        base_url: str = "https://sheets.googleapis.com/v4",
    ) -> None:
        self._spreadsheet_id = spreadsheet_id
        self._credentials = credentials
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._category_range = f"{reference_sheet}!A:A"
        self._spender_range = f"{reference_sheet}!B:B"
        self._card_range = f"{reference_sheet}!D:D"
        self._ledger_range = f"{ledger_sheet}!A:G"

    @classmethod
    def from_settings(cls, settings: Settings, http_client: Optional[httpx.AsyncClient] = None) -> "SheetsClient":
        """Build a client from the service-account file named in settings."""

        credentials = service_account.Credentials.from_service_account_file(
            settings.google_credentials_file,
            scopes=[SHEETS_SCOPE],
        )
        return cls(
            spreadsheet_id=settings.google_sheets_id,
            credentials=credentials,
            http_client=http_client or httpx.AsyncClient(timeout=settings.sheets_timeout_seconds),
            reference_sheet=settings.reference_sheet,
            ledger_sheet=settings.ledger_sheet,
            base_url=settings.sheets_api_base_url,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _auth_headers(self) -> dict[str, str]:
        if not self._credentials.valid:
            # google-auth refresh is blocking
            await asyncio.to_thread(self._credentials.refresh, google.auth.transport.requests.Request())
        return {"Authorization": f"Bearer {self._credentials.token}"}

    def _values_url(self, suffix: str) -> str:
        return f"{self._base_url}/spreadsheets/{self._spreadsheet_id}/values{suffix}"

    async def fetch_reference_columns(self) -> ReferenceColumns:
        """Read the category, spender and card columns in one batch request."""

        ranges = [self._category_range, self._spender_range, self._card_range]
        try:
            response = await self._http.get(
                self._values_url(":batchGet"),
                params=[("ranges", r) for r in ranges] + [("majorDimension", "COLUMNS")],
                headers=await self._auth_headers(),
            )
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, GoogleAuthError, ValueError) as exc:
            raise ReferenceFetchError(f"Failed to read reference ranges: {exc}") from exc

        if not isinstance(body, dict):
            raise ReferenceFetchError("Reference ranges response is not a JSON object")

        # valueRanges come back in request order
        value_ranges = body.get("valueRanges") or []
        columns: list[list[Any]] = []
        for index in range(len(ranges)):
            values = value_ranges[index].get("values") if index < len(value_ranges) else None
            columns.append(list(values[0]) if values else [])

        return ReferenceColumns(categories=columns[0], spenders=columns[1], cards=columns[2])

    async def append_row(self, row: list[Any]) -> None:
        """Append one row below the last ledger row."""

        try:
            response = await self._http.post(
                self._values_url(f"/{self._ledger_range}:append"),
                params={"valueInputOption": "USER_ENTERED", "insertDataOption": "INSERT_ROWS"},
                json={"values": [row]},
                headers=await self._auth_headers(),
            )
            response.raise_for_status()
        except (httpx.HTTPError, GoogleAuthError) as exc:
            raise AppendError(f"Failed to append expense row: {exc}") from exc

        logger.info("Appended ledger row to %s", self._ledger_range)
