"""signword_catalog.csv_text

CSV text → rows for the spreadsheet CSV export.

The stdlib csv module is not used here: the sheet export has to be read with
a slightly different rule set than csv.reader applies.
  - a bare '\\r' outside quotes is dropped instead of ending a record
  - a '"' anywhere outside quoted mode opens quoted mode
  - nothing ever raises; unbalanced quotes swallow the rest of the text
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

def parse_csv(text: str) -> list[list[str]]:
    """Split CSV text into rows of raw (untrimmed) fields.

    Inside quotes a doubled '""' is a literal quote, and ',' / '\\n' are
    ordinary characters.  A final row without a trailing newline is still
    returned.
    """
    rows: list[list[str]] = []
    row: list[str] = []
    buf: list[str] = []
    in_quotes = False
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        if in_quotes:
            if ch == '"':
                if i + 1 < n and text[i + 1] == '"':
                    buf.append('"')
                    i += 1
                else:
                    in_quotes = False
            else:
                buf.append(ch)
        elif ch == '"':
            in_quotes = True
        elif ch == ",":
            row.append("".join(buf))
            buf = []
        elif ch == "\r":
            pass
        elif ch == "\n":
            row.append("".join(buf))
            rows.append(row)
            row = []
            buf = []
        else:
            buf.append(ch)
        i += 1

    if buf or row:
        row.append("".join(buf))
        rows.append(row)

    return rows


# ---------------------------------------------------------------------------
# Row mapper
# ---------------------------------------------------------------------------

def normalize_header(cell: str) -> str:
    """Header cells are matched case-insensitively and ignore padding."""
    return cell.strip().lower()


def csv_to_rows(text: str) -> list[dict[str, str]]:
    """Return one {header: trimmed value} dict per non-blank data row.

    Row 0 is the header.  Short rows fill missing columns with '', extra
    fields are ignored, columns with a blank header are skipped and a
    repeated header keeps the right-most column's value.
    """
    table = parse_csv(text)
    if not table:
        return []

    header = [normalize_header(h) for h in table[0]]
    rows: list[dict[str, str]] = []
    for raw in table[1:]:
        row: dict[str, str] = {}
        for idx, key in enumerate(header):
            if not key:
                continue
            value = raw[idx] if idx < len(raw) else ""
            row[key] = value.strip()
        if any(v != "" for v in row.values()):
            rows.append(row)
    return rows
