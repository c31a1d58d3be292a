"""URL helpers for Google Drive hosted videos.

extract_drive_file_id() pulls the file id out of a share link; the two
builders turn a share link into a playback URL (through the Apps Script
proxy) and an embeddable preview URL.  Both builders hand back the original
URL untouched when no id can be found.
"""

from __future__ import annotations

import re
import urllib.parse

DRIVE_HOST = "drive.google.com"
_FILE_PATH_PREFIX = "drive.google.com/file/d/"
_FILE_PATH_MARKER = "/file/d/"
_ID_QUERY_RE = re.compile(r"[?&]id=([^&]+)")

PREVIEW_URL_TEMPLATE = "https://drive.google.com/file/d/{file_id}/preview"
STREAM_ACTION = "streamVideo"

# Characters JavaScript's encodeURIComponent leaves alone.
_URI_COMPONENT_SAFE = "-_.!~*'()"


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------

def extract_drive_file_id(url: str | None) -> str | None:
    """Return the Drive file id for url, or None.

    Accepted shapes, tried in order:
      - https://drive.google.com/file/d/{id}/view?usp=sharing
      - https://drive.google.com/open?id={id}  (also '&id=')

    Non-Drive URLs and links where the id is empty return None.
    """
    if not url or DRIVE_HOST not in url:
        return None

    file_id = ""
    if _FILE_PATH_PREFIX in url:
        start = url.find(_FILE_PATH_MARKER)
        if start == -1:
            return url
        after = url[start + len(_FILE_PATH_MARKER):]
        ends = [i for i in (after.find("/"), after.find("?")) if i != -1]
        file_id = after[:min(ends)] if ends else after
    else:
        m = _ID_QUERY_RE.search(url)
        if m:
            file_id = m.group(1)

    return file_id or None


# ---------------------------------------------------------------------------
# Rewriters
# ---------------------------------------------------------------------------

def build_playback_url(url: str, proxy_url: str | None = None) -> str:
    """Route a Drive video through the streaming proxy.

    Falls back to url when there is no file id or no proxy configured.
    """
    file_id = extract_drive_file_id(url)
    if not file_id or not proxy_url:
        return url
    sep = "&" if "?" in proxy_url else "?"
    quoted = urllib.parse.quote(file_id, safe=_URI_COMPONENT_SAFE)
    return f"{proxy_url}{sep}action={STREAM_ACTION}&fileId={quoted}"


def build_preview_url(url: str) -> str:
    """Return the Drive /preview embed URL, or url when there is no file id."""
    file_id = extract_drive_file_id(url)
    if not file_id:
        return url
    return PREVIEW_URL_TEMPLATE.format(file_id=file_id)
