"""Search and facet helpers over a built catalog."""

from __future__ import annotations

from typing import Iterable

from signword_catalog.records import CatalogEntry

ALL = "all"


def _searchable_text(entry: CatalogEntry) -> str:
    return " ".join([
        entry.word,
        entry.meaning or "",
        " ".join(entry.tags),
        entry.notes or "",
    ]).lower()


def filter_entries(
    entries: Iterable[CatalogEntry],
    term: str = "",
    level: str | None = None,
    tag: str | None = None,
) -> list[CatalogEntry]:
    """Return entries matching all given filters, in catalog order.

    level and tag are exact matches; None or 'all' disables them.  term is
    a case-insensitive substring match over word, meaning, tags and notes.
    """
    needle = (term or "").strip().lower()
    result: list[CatalogEntry] = []
    for entry in entries:
        if level not in (None, ALL) and entry.level != level:
            continue
        if tag not in (None, ALL) and tag not in entry.tags:
            continue
        if needle and needle not in _searchable_text(entry):
            continue
        result.append(entry)
    return result


def available_levels(entries: Iterable[CatalogEntry]) -> list[str]:
    return sorted({e.level for e in entries if e.level})


def available_tags(entries: Iterable[CatalogEntry]) -> list[str]:
    return sorted({t for e in entries for t in e.tags})
