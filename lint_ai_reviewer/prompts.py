"""
Prompt templates for the Lint AI Code Reviewer.

The model reviews one file at a time. The system instruction fixes the
reviewer persona; the user prompt carries the file's patch and (possibly
truncated) content.
"""

from typing import Optional

from .utils import get_file_extension, truncate_content


SYSTEM_INSTRUCTION = (
    "You are an experienced code reviewer. Provide concise, helpful feedback focusing on "
    "code quality, readability, and best practices. Be constructive and specific."
)

FOCUS_AREAS = [
    "Code readability and maintainability",
    "Naming conventions",
    "Potential bugs or improvements",
    "Best practices",
]

FILE_REVIEW_TEMPLATE = """As a senior code reviewer, please review this {extension} file and provide constructive feedback focusing on:
{focus_areas}

File: {filename}

{patch_section}

Full file content:
```{language}
{content}
```

Please provide specific, actionable feedback. If the code looks good, just say so briefly."""

PATCH_SECTION_TEMPLATE = """Changed lines (patch):
```diff
{patch}
```"""


def build_file_review_prompt(
    filename: str,
    content: str,
    patch: Optional[str] = None,
    max_content_chars: int = 3000
) -> str:
    """Build the user prompt for reviewing one file.

    Args:
        filename: Path of the file in the repository
        content: Full file content; truncated to ``max_content_chars``
        patch: Unified diff fragment for the file, if GitHub provided one
        max_content_chars: Character budget for the file content

    Returns:
        The prompt text
    """
    extension = get_file_extension(filename)
    focus_areas = "\n".join(f"{i}. {area}" for i, area in enumerate(FOCUS_AREAS, 1))
    patch_section = PATCH_SECTION_TEMPLATE.format(patch=patch) if patch else ""

    return FILE_REVIEW_TEMPLATE.format(
        extension=extension,
        focus_areas=focus_areas,
        filename=filename,
        patch_section=patch_section,
        language=extension.lstrip("."),
        content=truncate_content(content, max_content_chars),
    )
