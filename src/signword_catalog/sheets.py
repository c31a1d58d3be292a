"""signword_catalog.sheets

Fetches the words and videos tabs of the source spreadsheet as CSV text
through the sheet's public gviz CSV export.

Both tabs are requested at the same time on a two-worker thread pool.  The
caller gets either both texts or a SheetFetchError; a failure on one tab is
never combined with a half-loaded other tab.
"""

from __future__ import annotations

import logging
import urllib.parse
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import requests

from signword_catalog.config import CatalogConfig

log = logging.getLogger(__name__)

SHEET_CSV_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:csv&sheet={sheet}"
USER_AGENT = "signword-catalog/1.0"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class SheetFetchError(RuntimeError):
    """Raised when a sheet cannot be downloaded (transport error or non-2xx)."""

    def __init__(self, sheet_name: str, reason: str) -> None:
        super().__init__(f"Failed to fetch sheet {sheet_name}: {reason}")
        self.sheet_name = sheet_name
        self.reason = reason


# ---------------------------------------------------------------------------
# Raw tables
# ---------------------------------------------------------------------------

@dataclass
class RawTables:
    words_csv: str
    videos_csv: str


def sheet_csv_url(sheet_id: str, sheet_name: str) -> str:
    return SHEET_CSV_URL.format(
        sheet_id=sheet_id,
        sheet=urllib.parse.quote(sheet_name, safe=""),
    )


# ---------------------------------------------------------------------------
# Fetch helpers
# ---------------------------------------------------------------------------

def fetch_sheet_text(
    session: requests.Session,
    sheet_id: str,
    sheet_name: str,
    timeout: float,
) -> str:
    """GET one tab as CSV text.  Raises SheetFetchError on any failure."""
    url = sheet_csv_url(sheet_id, sheet_name)
    try:
        resp = session.get(url, timeout=timeout)
    except requests.RequestException as exc:
        log.error("Sheet GET failed for %s: %s", sheet_name, exc)
        raise SheetFetchError(sheet_name, str(exc)) from exc

    if not resp.ok:
        log.error("Sheet GET for %s returned status %s", sheet_name, resp.status_code)
        raise SheetFetchError(sheet_name, f"HTTP {resp.status_code}")

    # gviz omits the charset; the export is always UTF-8.
    resp.encoding = "utf-8"
    text = resp.text
    log.debug("Fetched sheet %s (%d chars)", sheet_name, len(text))
    return text


def fetch_tables(
    config: CatalogConfig,
    session: requests.Session | None = None,
) -> RawTables:
    """Fetch the words and videos tabs concurrently.

    Both requests are awaited before returning.  If either fails, its
    SheetFetchError propagates (words first when both fail).
    """
    if not config.sheet_id:
        raise SheetFetchError(config.words_sheet, "no sheet_id configured")

    own_session = session is None
    if session is None:
        session = requests.Session()
        session.headers.update({"User-Agent": USER_AGENT})

    try:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="sheet-fetch") as pool:
            words_future = pool.submit(
                fetch_sheet_text, session, config.sheet_id, config.words_sheet, config.timeout,
            )
            videos_future = pool.submit(
                fetch_sheet_text, session, config.sheet_id, config.videos_sheet, config.timeout,
            )
            words_exc = words_future.exception()
            videos_exc = videos_future.exception()
            if words_exc is not None:
                raise words_exc
            if videos_exc is not None:
                raise videos_exc
            return RawTables(
                words_csv=words_future.result(),
                videos_csv=videos_future.result(),
            )
    finally:
        if own_session:
            session.close()
