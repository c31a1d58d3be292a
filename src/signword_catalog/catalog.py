"""signword_catalog.catalog

Joins the words sheet and the videos sheet into one CatalogEntry per word.

Join rules:
  - words need a non-blank word_id and word; a repeated word_id replaces
    the earlier row (last write wins, no merge)
  - videos need a non-blank video_url
  - a video lands in word_videos or sentence_videos of the word it names;
    videos with no word_id or an unknown word_id are dropped
  - entries are ordered by word (see normalize.collation_key)

None of these drops raise.  Each one is classified with a DropReason and
counted on CatalogCounters when a counters object is passed in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from signword_catalog.config import CatalogConfig
from signword_catalog.csv_text import csv_to_rows
from signword_catalog.normalize import collation_key
from signword_catalog.records import (
    CatalogEntry,
    VideoRecord,
    WordRecord,
    map_video_row,
    map_word_row,
)
from signword_catalog.sheets import RawTables, SheetFetchError, fetch_tables

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Drop reasons + counters
# ---------------------------------------------------------------------------

class DropReason(str, Enum):
    WORD_MISSING_ID = "word_missing_id"
    WORD_MISSING_WORD = "word_missing_word"
    WORD_DUPLICATE_ID = "word_duplicate_id"
    VIDEO_MISSING_URL = "video_missing_url"
    VIDEO_MISSING_PARENT = "video_missing_parent"
    VIDEO_UNKNOWN_PARENT = "video_unknown_parent"


@dataclass
class CatalogCounters:
    word_rows_read: int = 0
    video_rows_read: int = 0
    words_included: int = 0
    word_videos_linked: int = 0
    sentence_videos_linked: int = 0
    dropped: dict[str, int] = field(default_factory=dict)

    def drop(self, reason: DropReason) -> None:
        self.dropped[reason.value] = self.dropped.get(reason.value, 0) + 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "word_rows_read": self.word_rows_read,
            "video_rows_read": self.video_rows_read,
            "words_included": self.words_included,
            "word_videos_linked": self.word_videos_linked,
            "sentence_videos_linked": self.sentence_videos_linked,
            "dropped": dict(self.dropped),
        }


# ---------------------------------------------------------------------------
# Filtering predicates
# ---------------------------------------------------------------------------

def word_drop_reason(rec: WordRecord) -> DropReason | None:
    if not rec.word_id:
        return DropReason.WORD_MISSING_ID
    if not rec.word:
        return DropReason.WORD_MISSING_WORD
    return None


def video_drop_reason(
    video: VideoRecord,
    entries: dict[str, CatalogEntry],
) -> DropReason | None:
    if not video.source_url:
        return DropReason.VIDEO_MISSING_URL
    if not video.parent_word_id:
        return DropReason.VIDEO_MISSING_PARENT
    if video.parent_word_id not in entries:
        return DropReason.VIDEO_UNKNOWN_PARENT
    return None


# ---------------------------------------------------------------------------
# Join
# ---------------------------------------------------------------------------

def build_catalog(
    word_rows: Iterable[dict[str, str]],
    video_rows: Iterable[dict[str, str]],
    proxy_url: str | None = None,
    counters: CatalogCounters | None = None,
) -> list[CatalogEntry]:
    """Join mapped sheet rows into the sorted list of catalog entries.

    Args:
        word_rows: Header-keyed rows of the words sheet, in sheet order.
        video_rows: Header-keyed rows of the videos sheet, in sheet order.
        proxy_url: Apps Script endpoint for playback URLs; None disables it.
        counters: Optional tally of included and dropped rows.
    """
    if counters is None:
        counters = CatalogCounters()

    entries: dict[str, CatalogEntry] = {}
    for row in word_rows:
        counters.word_rows_read += 1
        rec = map_word_row(row)
        reason = word_drop_reason(rec)
        if reason is not None:
            counters.drop(reason)
            continue
        if rec.word_id in entries:
            # The earlier row is the one that falls out.
            counters.drop(DropReason.WORD_DUPLICATE_ID)
        entries[rec.word_id] = CatalogEntry.from_word(rec)

    for row in video_rows:
        counters.video_rows_read += 1
        video = map_video_row(row, proxy_url)
        reason = video_drop_reason(video, entries)
        if reason is not None:
            counters.drop(reason)
            continue
        entries[video.parent_word_id].add_video(video)

    result = sorted(entries.values(), key=lambda e: collation_key(e.word))

    counters.words_included = len(result)
    counters.word_videos_linked = sum(len(e.word_videos) for e in result)
    counters.sentence_videos_linked = sum(len(e.sentence_videos) for e in result)
    log.debug("Catalog built: %s", counters.to_dict())
    return result


def build_catalog_from_csv(
    words_csv: str,
    videos_csv: str,
    proxy_url: str | None = None,
    counters: CatalogCounters | None = None,
) -> list[CatalogEntry]:
    """Parse both CSV texts and join them."""
    return build_catalog(
        csv_to_rows(words_csv),
        csv_to_rows(videos_csv),
        proxy_url=proxy_url,
        counters=counters,
    )


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

@dataclass
class CatalogLoadResult:
    """entries == [] with error_message None means the sheets were empty."""

    entries: list[CatalogEntry]
    error_message: str | None = None
    counters: CatalogCounters = field(default_factory=CatalogCounters)

    @property
    def ok(self) -> bool:
        return self.error_message is None


def load_catalog(
    config: CatalogConfig,
    tables: RawTables | None = None,
    session: Any = None,
) -> CatalogLoadResult:
    """Fetch both sheets (unless tables is given) and build the catalog.

    A SheetFetchError is logged and reported through error_message instead
    of raising, so callers can tell a failed fetch from an empty catalog.
    """
    counters = CatalogCounters()
    if tables is None:
        try:
            tables = fetch_tables(config, session=session)
        except SheetFetchError as exc:
            log.error("Failed to load sign words: %s", exc)
            return CatalogLoadResult(entries=[], error_message=str(exc), counters=counters)

    entries = build_catalog_from_csv(
        tables.words_csv,
        tables.videos_csv,
        proxy_url=config.proxy_url,
        counters=counters,
    )
    return CatalogLoadResult(entries=entries, counters=counters)


def find_entry(entries: Iterable[CatalogEntry], word_id: str) -> CatalogEntry | None:
    """Return the entry whose word_id matches, or None."""
    for entry in entries:
        if entry.word_id == str(word_id):
            return entry
    return None


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

def build_catalog_report(result: CatalogLoadResult) -> str:
    c = result.counters
    lines = [
        "=== Sign Word Catalog Report ===",
        f"status                 : {'ok' if result.ok else 'fetch_failed'}",
        "",
        "--- Input ---",
        f"word_rows_read         : {c.word_rows_read}",
        f"video_rows_read        : {c.video_rows_read}",
        "",
        "--- Catalog ---",
        f"words_included         : {c.words_included}",
        f"word_videos_linked     : {c.word_videos_linked}",
        f"sentence_videos_linked : {c.sentence_videos_linked}",
    ]
    if c.dropped:
        lines += ["", "--- Dropped ---"]
        lines += [f"{reason:<23}: {count}" for reason, count in sorted(c.dropped.items())]
    if result.error_message:
        lines += ["", f"error                  : {result.error_message}"]
    return "\n".join(lines)
