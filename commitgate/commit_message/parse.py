"""Parsing of raw commit messages into Commit models."""
import re
from typing import List, Optional, Tuple

from ..models import Commit

BREAKING_CHANGE_NOTE = "BREAKING CHANGE"
DEPRECATED_NOTE = "DEPRECATED"

FIXUP_PREFIX_RE = re.compile(r"^fixup! ", re.IGNORECASE)
SQUASH_PREFIX_RE = re.compile(r"^squash! ", re.IGNORECASE)
REVERT_PREFIX_RE = re.compile(r"^revert:? ", re.IGNORECASE)

HEADER_RE = re.compile(r"^(\w+)(?:\(([^)]+)\))?: (.*)$")
NOTE_RE = re.compile(
    rf"^\s*({BREAKING_CHANGE_NOTE}|{DEPRECATED_NOTE}): ?(.*)$"
)
COMMENT_CHAR = "#"


def _strip_markers(text: str) -> str:
    text = FIXUP_PREFIX_RE.sub("", text, count=1)
    text = SQUASH_PREFIX_RE.sub("", text, count=1)
    return REVERT_PREFIX_RE.sub("", text, count=1)


def _split_notes(lines: List[str]) -> Tuple[List[str], List[str], List[Tuple[str, str]]]:
    """Split the lines after the header into body lines, footer lines and notes.

    The footer starts at the first ``BREAKING CHANGE:`` or ``DEPRECATED:``
    line. Every note collects the text on its title line plus any following
    lines up to the next note.
    """
    body: List[str] = []
    footer: List[str] = []
    notes: List[Tuple[str, str]] = []
    current: Optional[List] = None

    for line in lines:
        match = NOTE_RE.match(line)
        if match:
            current = [match.group(1), [match.group(2)]]
            notes.append(current)
            footer.append(line)
        elif current is not None:
            current[1].append(line)
            footer.append(line)
        else:
            body.append(line)

    flattened = [(title, "\n".join(text).strip()) for title, text in notes]
    return body, footer, flattened


def parse_commit_message(full_text: str, sha: Optional[str] = None) -> Commit:
    """Parse a raw commit message.

    Comment lines (starting with ``#``) are dropped, as git does when it
    writes the message of a new commit.
    """
    full_text = str(full_text)
    stripped = _strip_markers(full_text)
    lines = [
        line for line in stripped.split("\n")
        if not line.startswith(COMMENT_CHAR)
    ]
    header = lines[0].strip() if lines else ""

    match = HEADER_RE.match(header)
    type_, scope, subject = ("", "", "")
    if match:
        type_, scope, subject = match.group(1), match.group(2) or "", match.group(3)

    body_lines, footer_lines, notes = _split_notes(lines[1:])

    return Commit(
        header=header,
        body="\n".join(body_lines).strip(),
        footer="\n".join(footer_lines).strip(),
        full_text=full_text,
        type=type_,
        scope=scope,
        subject=subject,
        breaking_changes=[text for title, text in notes if title == BREAKING_CHANGE_NOTE],
        deprecations=[text for title, text in notes if title == DEPRECATED_NOTE],
        is_fixup=bool(FIXUP_PREFIX_RE.match(full_text)),
        is_squash=bool(SQUASH_PREFIX_RE.match(full_text)),
        is_revert=bool(REVERT_PREFIX_RE.match(full_text)),
        sha=sha,
    )
