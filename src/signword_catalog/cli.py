"""signword_catalog.cli

Command-line entry point.  Builds the catalog from the live spreadsheet
(or from two local CSV exports) and prints it as JSON, a filtered JSON
list, one entry, or a text run report.

Examples:
    signword-catalog --mode report --config config/signword.example.yml
    signword-catalog --mode search --words-csv words.csv --videos-csv videos.csv --term 사과
    signword-catalog --mode show --word-id W1
"""

from __future__ import annotations

import json
import logging
import sys
import uuid
from pathlib import Path

import click

from signword_catalog.catalog import build_catalog_report, find_entry, load_catalog
from signword_catalog.config import ConfigValidationError, load_config
from signword_catalog.search import available_levels, available_tags, filter_entries
from signword_catalog.sheets import RawTables

log = logging.getLogger(__name__)


def _dump(data: object) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


@click.command()
@click.option(
    "--mode",
    default="catalog",
    type=click.Choice(["catalog", "search", "show", "report"]),
    show_default=True,
    help="Output mode",
)
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False), help="YAML config file")
# source overrides
@click.option("--sheet-id", default=None, help="Spreadsheet id (overrides config)")
@click.option("--proxy-url", default=None, help="Apps Script proxy for playback URLs (overrides config)")
@click.option("--words-csv", default=None, type=click.Path(exists=True, dir_okay=False), help="Local words CSV; skips fetching")
@click.option("--videos-csv", default=None, type=click.Path(exists=True, dir_okay=False), help="Local videos CSV; skips fetching")
# search / show flags
@click.option("--term", default="", help="[search] Case-insensitive text filter")
@click.option("--level", default=None, help="[search] Exact level filter ('all' for none)")
@click.option("--tag", default=None, help="[search] Exact tag filter ('all' for none)")
@click.option("--word-id", default=None, help="[show] word_id to print")
# shared flags
@click.option("--run-id", default=None, help="Override UUID for log correlation")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    show_default=True,
)
def main(
    mode: str,
    config_path: str | None,
    sheet_id: str | None,
    proxy_url: str | None,
    words_csv: str | None,
    videos_csv: str | None,
    term: str,
    level: str | None,
    tag: str | None,
    word_id: str | None,
    run_id: str | None,
    log_level: str,
) -> None:
    """Sign-word catalog CLI."""
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_id = run_id or str(uuid.uuid4())

    if bool(words_csv) != bool(videos_csv):
        click.echo(f"[{run_id}] FATAL: --words-csv and --videos-csv must be given together", err=True)
        sys.exit(1)
    if mode == "show" and not word_id:
        click.echo(f"[{run_id}] FATAL: --mode show requires --word-id", err=True)
        sys.exit(1)

    try:
        config = load_config(Path(config_path) if config_path else None)
    except ConfigValidationError as exc:
        click.echo(f"[{run_id}] FATAL: invalid config: {exc}", err=True)
        sys.exit(1)
    if sheet_id:
        config.sheet_id = sheet_id
    if proxy_url:
        config.proxy_url = proxy_url

    tables = None
    if words_csv and videos_csv:
        tables = RawTables(
            words_csv=Path(words_csv).read_text(encoding="utf-8-sig"),
            videos_csv=Path(videos_csv).read_text(encoding="utf-8-sig"),
        )
    elif not config.sheet_id:
        click.echo(f"[{run_id}] FATAL: no sheet_id configured and no local CSVs given", err=True)
        sys.exit(1)

    log.info("[%s] Starting %s run", run_id, mode)
    result = load_catalog(config, tables=tables)

    if mode == "report":
        click.echo(build_catalog_report(result))
        if not result.ok:
            sys.exit(1)
        return

    if not result.ok:
        click.echo(f"[{run_id}] FATAL: {result.error_message}", err=True)
        sys.exit(1)

    entries = result.entries
    if mode == "catalog":
        click.echo(_dump([e.to_dict() for e in entries]))
    elif mode == "search":
        matched = filter_entries(entries, term=term, level=level, tag=tag)
        click.echo(_dump({
            "total": len(entries),
            "matched": len(matched),
            "levels": available_levels(entries),
            "tags": available_tags(entries),
            "entries": [e.to_dict() for e in matched],
        }))
    elif mode == "show":
        entry = find_entry(entries, word_id)
        if entry is None:
            click.echo(f"[{run_id}] word_id not found: {word_id}", err=True)
            sys.exit(1)
        click.echo(_dump(entry.to_dict()))

    log.info("[%s] Done: %d words", run_id, len(entries))


if __name__ == "__main__":
    main()
