"""
Shared utility functions for the Lint AI Code Reviewer.
"""

import logging
import os
from typing import Iterable, List, Optional

from .models import ChangedFile


logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "..."


def get_file_extension(file_path: str) -> str:
    """Return the extension of ``file_path`` including the dot, or ''.

    Args:
        file_path: The file path to analyze

    Returns:
        Extension such as '.ts', or an empty string
    """
    return os.path.splitext(file_path)[1]


def has_supported_extension(file_path: str, extensions: Iterable[str]) -> bool:
    """Check whether ``file_path`` ends with one of ``extensions``."""
    return any(file_path.endswith(ext) for ext in extensions)


def filter_reviewable_files(files: Iterable[ChangedFile], extensions: Iterable[str]) -> List[ChangedFile]:
    """Keep supported source files that still exist in the pull request head.

    Removed files are dropped since there is nothing left to lint or review.
    Input order is preserved.
    """
    extensions = list(extensions)
    return [
        f for f in files
        if has_supported_extension(f.filename, extensions) and not f.is_removed
    ]


def truncate_content(content: str, max_chars: int) -> str:
    """Cut ``content`` to ``max_chars`` characters and mark the cut.

    Large files can lose their changed region this way; the model then
    comments on the head of the file only.
    """
    if len(content) <= max_chars:
        return content
    return f"{content[:max_chars]} {TRUNCATION_MARKER}"


def read_file_content(file_path: str, base_dir: Optional[str] = None) -> Optional[str]:
    """Read a file from the local checkout, returning None if it is unreadable."""
    full_path = os.path.join(base_dir, file_path) if base_dir else file_path
    try:
        with open(full_path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as e:
        logger.warning(f"Could not read {file_path}: {str(e)}")
        return None

