"""
Unified diff helpers for anchoring comments to pull request lines.

GitHub returns a ``patch`` fragment per changed file. Only hunk headers are
needed here: an AI suggestion covers the whole file, so it is anchored at the
first line of the first changed block in the new version of the file.
"""

import re
from dataclasses import dataclass
from typing import List, Optional


HUNK_HEADER_PATTERN = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@", re.MULTILINE)


@dataclass(frozen=True)
class HunkHeader:
    """Line ranges parsed from a ``@@ -a,b +c,d @@`` header."""
    source_start: int
    source_length: int
    target_start: int
    target_length: int


def parse_hunk_headers(patch: Optional[str]) -> List[HunkHeader]:
    """Return every hunk header found in ``patch``, in order.

    Omitted lengths default to 1, as in the unified diff format.
    """
    if not patch:
        return []

    headers = []
    for match in HUNK_HEADER_PATTERN.finditer(patch):
        source_start, source_length, target_start, target_length = match.groups()
        headers.append(HunkHeader(
            source_start=int(source_start),
            source_length=int(source_length) if source_length is not None else 1,
            target_start=int(target_start),
            target_length=int(target_length) if target_length is not None else 1,
        ))
    return headers


def first_new_line(patch: Optional[str], default: int = 1) -> int:
    """Return the new-file start line of the first hunk, or ``default``.

    A start of 0 (a hunk that empties the file) is not a valid anchor and
    falls back to ``default`` as well.
    """
    headers = parse_hunk_headers(patch)
    if not headers:
        return default
    return headers[0].target_start or default
