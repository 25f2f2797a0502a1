from __future__ import annotations

import re
from pathlib import Path

FRONT_MATTER_MARKER = "---"
DESCRIPTION_LIMIT = 160
MARKUP_CHARS_RE = re.compile(r"[#*_`\[\]]")
PARENTHESIZED_RE = re.compile(r"\(.*?\)")
WHITESPACE_RE = re.compile(r"\s+")


def parse_front_matter(text: str) -> tuple[dict[str, str], str]:
    lines = text.split("\n")
    if lines[0] != FRONT_MATTER_MARKER:
        return {}, text

    end = None
    for i in range(1, len(lines)):
        if lines[i] == FRONT_MATTER_MARKER:
            end = i
            break
    if end is None:
        return {}, text

    meta = {}
    for line in lines[1:end]:
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        meta[key.strip()] = value.strip()
    body = "\n".join(lines[end + 1 :]).strip()
    return meta, body


def extract_description(body: str) -> str:
    paragraph = body.split("\n\n", 1)[0]
    text = MARKUP_CHARS_RE.sub("", paragraph)
    text = PARENTHESIZED_RE.sub("", text)
    text = WHITESPACE_RE.sub(" ", text).strip()
    return text[:DESCRIPTION_LIMIT]


def slug_from_path(path: str | Path) -> str:
    return Path(path).stem
