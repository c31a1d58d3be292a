"""signword_catalog.records

Typed records for the two sheets plus the joined catalog entry, and the
row mappers that build them from header-keyed CSV rows.

Column contracts (header names are lower-cased by csv_text):
  words : word_id, word, word_type, meaning, tags, level, notes
  videos: video_id, type, word_id, sentence_text, video_url, description,
          signer, tags, created_at

Blank handling differs per field on purpose: optional word fields and most
optional video fields become None, while video description/signer become ''.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from signword_catalog.drive_links import build_playback_url, build_preview_url
from signword_catalog.normalize import (
    VideoKind,
    blank_to_empty,
    normalize_video_kind,
    split_tags,
    trim,
)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass
class WordRecord:
    word_id: str
    word: str
    word_type: str | None = None
    meaning: str | None = None
    level: str | None = None
    notes: str | None = None
    tags: list[str] = field(default_factory=list)


@dataclass
class VideoRecord:
    id: str                  # video_id, or source_url when video_id is blank
    kind: VideoKind
    source_url: str
    playback_url: str
    preview_url: str
    parent_word_id: str | None = None
    sentence_text: str | None = None
    description: str = ""
    signer: str = ""
    tags: list[str] = field(default_factory=list)
    created_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["kind"] = self.kind.value
        return d


@dataclass
class CatalogEntry:
    word_id: str
    word: str
    word_type: str | None = None
    meaning: str | None = None
    level: str | None = None
    notes: str | None = None
    tags: list[str] = field(default_factory=list)
    word_videos: list[VideoRecord] = field(default_factory=list)
    sentence_videos: list[VideoRecord] = field(default_factory=list)

    @classmethod
    def from_word(cls, rec: WordRecord) -> CatalogEntry:
        return cls(
            word_id=rec.word_id,
            word=rec.word,
            word_type=rec.word_type,
            meaning=rec.meaning,
            level=rec.level,
            notes=rec.notes,
            tags=list(rec.tags),
        )

    def add_video(self, video: VideoRecord) -> None:
        if video.kind is VideoKind.SENTENCE:
            self.sentence_videos.append(video)
        else:
            self.word_videos.append(video)

    def to_dict(self) -> dict[str, Any]:
        return {
            "word_id": self.word_id,
            "word": self.word,
            "word_type": self.word_type,
            "meaning": self.meaning,
            "level": self.level,
            "notes": self.notes,
            "tags": list(self.tags),
            "word_videos": [v.to_dict() for v in self.word_videos],
            "sentence_videos": [v.to_dict() for v in self.sentence_videos],
        }


# ---------------------------------------------------------------------------
# Row mappers
# ---------------------------------------------------------------------------

def map_word_row(row: dict[str, str]) -> WordRecord:
    """Map one words-sheet row.  word_id/word stay literal (may be '')."""
    return WordRecord(
        word_id=row.get("word_id") or "",
        word=row.get("word") or "",
        word_type=trim(row.get("word_type")),
        meaning=trim(row.get("meaning")),
        level=trim(row.get("level")),
        notes=trim(row.get("notes")),
        tags=split_tags(row.get("tags")),
    )


def map_video_row(row: dict[str, str], proxy_url: str | None = None) -> VideoRecord:
    """Map one videos-sheet row and derive its playback/preview URLs."""
    source_url = row.get("video_url") or ""
    return VideoRecord(
        id=row.get("video_id") or source_url,
        kind=normalize_video_kind(row.get("type")),
        source_url=source_url,
        playback_url=build_playback_url(source_url, proxy_url),
        preview_url=build_preview_url(source_url),
        parent_word_id=trim(row.get("word_id")),
        sentence_text=trim(row.get("sentence_text")),
        description=blank_to_empty(row.get("description")),
        signer=blank_to_empty(row.get("signer")),
        tags=split_tags(row.get("tags")),
        created_at=trim(row.get("created_at")),
    )
