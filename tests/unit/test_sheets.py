"""Unit tests for sheet fetching (HTTP session mocked)."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from signword_catalog.config import CatalogConfig
from signword_catalog.sheets import (
    RawTables,
    SheetFetchError,
    fetch_sheet_text,
    fetch_tables,
    sheet_csv_url,
)

CONFIG = CatalogConfig(sheet_id="SHEET", words_sheet="words", videos_sheet="videos", timeout=7)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_resp(status: int, text: str = "") -> MagicMock:
    r = MagicMock()
    r.status_code = status
    r.ok = 200 <= status < 400
    r.text = text
    return r


def _session_for(responses: dict[str, object]) -> MagicMock:
    """Session whose get() answers by sheet name found in the URL."""
    session = MagicMock()

    def get(url, timeout=None):
        for name, resp in responses.items():
            if url.endswith(f"sheet={name}"):
                if isinstance(resp, Exception):
                    raise resp
                return resp
        raise AssertionError(f"unexpected url {url}")

    session.get.side_effect = get
    return session


# ---------------------------------------------------------------------------
# sheet_csv_url
# ---------------------------------------------------------------------------

class TestSheetCsvUrl:
    def test_builds_gviz_url(self):
        assert sheet_csv_url("SHEET", "words") == (
            "https://docs.google.com/spreadsheets/d/SHEET/gviz/tq?tqx=out:csv&sheet=words"
        )

    def test_quotes_sheet_name(self):
        url = sheet_csv_url("SHEET", "단어 목록")
        assert url.endswith("sheet=%EB%8B%A8%EC%96%B4%20%EB%AA%A9%EB%A1%9D")


# ---------------------------------------------------------------------------
# fetch_sheet_text
# ---------------------------------------------------------------------------

class TestFetchSheetText:
    def test_returns_text(self):
        session = _session_for({"words": _make_resp(200, "word_id,word\nW1,사과\n")})
        text = fetch_sheet_text(session, "SHEET", "words", 7)
        assert text == "word_id,word\nW1,사과\n"
        session.get.assert_called_once_with(sheet_csv_url("SHEET", "words"), timeout=7)

    def test_non_2xx_raises(self):
        session = _session_for({"words": _make_resp(404)})
        with pytest.raises(SheetFetchError, match="HTTP 404") as excinfo:
            fetch_sheet_text(session, "SHEET", "words", 7)
        assert excinfo.value.sheet_name == "words"

    def test_transport_error_raises(self):
        session = _session_for({"words": requests.ConnectionError("boom")})
        with pytest.raises(SheetFetchError, match="boom"):
            fetch_sheet_text(session, "SHEET", "words", 7)


# ---------------------------------------------------------------------------
# fetch_tables
# ---------------------------------------------------------------------------

class TestFetchTables:
    def test_fetches_both(self):
        session = _session_for({
            "words": _make_resp(200, "W"),
            "videos": _make_resp(200, "V"),
        })
        tables = fetch_tables(CONFIG, session=session)
        assert tables == RawTables(words_csv="W", videos_csv="V")
        assert session.get.call_count == 2

    def test_videos_failure_aborts(self):
        session = _session_for({
            "words": _make_resp(200, "W"),
            "videos": _make_resp(500),
        })
        with pytest.raises(SheetFetchError) as excinfo:
            fetch_tables(CONFIG, session=session)
        assert excinfo.value.sheet_name == "videos"

    def test_words_failure_reported_first(self):
        session = _session_for({
            "words": requests.Timeout("slow"),
            "videos": _make_resp(500),
        })
        with pytest.raises(SheetFetchError) as excinfo:
            fetch_tables(CONFIG, session=session)
        assert excinfo.value.sheet_name == "words"

    def test_missing_sheet_id(self):
        with pytest.raises(SheetFetchError, match="no sheet_id"):
            fetch_tables(CatalogConfig(), session=MagicMock())
