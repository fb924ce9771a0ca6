"""
Comment assembler for the Lint AI Code Reviewer.

This module merges ESLint findings and AI suggestions into the ordered list
of inline review comments for a pull request. Lint errors always come first,
followed by one AI comment per file at most; nothing is sorted or
deduplicated across the two sources.
"""

import logging
from typing import Callable, Iterable, List, Optional

from .diff_parser import first_new_line
from .models import ChangedFile, LintFinding, ReviewComment
from .suggestion_generator import SuggestionGenerator
from .utils import read_file_content


logger = logging.getLogger(__name__)


def format_lint_comment(finding: LintFinding) -> str:
    """Format the comment body for an ESLint error."""
    rule = f" ({finding.rule_id})" if finding.rule_id else ""
    return f"**ESLint Error**: {finding.message}{rule}"


class CommentAssembler:
    """Builds the review comment list for one run."""

    def __init__(
        self,
        suggestion_generator: SuggestionGenerator,
        content_reader: Callable[[str], Optional[str]] = read_file_content
    ):
        """Initialize the assembler.

        Args:
            suggestion_generator: Source of AI suggestions
            content_reader: Reads a file's content from the working tree,
                returning None when it cannot be read
        """
        self.suggestion_generator = suggestion_generator
        self.content_reader = content_reader

    def assemble(self, files: List[ChangedFile], findings: Iterable[LintFinding]) -> List[ReviewComment]:
        """Return lint error comments followed by AI suggestion comments."""
        lint_comments = self.build_lint_comments(files, findings)
        suggestion_comments = self.build_suggestion_comments(files)

        logger.info(
            f"Assembled {len(lint_comments)} lint comments and {len(suggestion_comments)} AI comments"
        )
        return lint_comments + suggestion_comments

    def build_lint_comments(self, files: List[ChangedFile], findings: Iterable[LintFinding]) -> List[ReviewComment]:
        """Turn ESLint errors into comments; warnings are left out."""
        reviewed_paths = {f.filename for f in files}
        comments = []

        for finding in findings:
            if not finding.is_error:
                continue
            if finding.file_path not in reviewed_paths:
                logger.debug(f"Ignoring finding for file outside the change set: {finding.file_path}")
                continue
            comments.append(ReviewComment(
                path=finding.file_path,
                line=finding.line,
                body=format_lint_comment(finding),
            ))

        return comments

    def build_suggestion_comments(self, files: List[ChangedFile]) -> List[ReviewComment]:
        """Ask for one suggestion per file, one file at a time, in order."""
        comments = []

        for i, changed_file in enumerate(files):
            logger.info(f"Generating AI review {i + 1}/{len(files)}: {changed_file.filename}")

            content = self.content_reader(changed_file.filename)
            if content is None:
                logger.warning(f"Skipping AI review for {changed_file.filename}: content unavailable")
                continue

            suggestion = self.suggestion_generator.generate(
                changed_file.filename, content, changed_file.patch
            )
            if not suggestion:
                continue

            comments.append(ReviewComment(
                path=changed_file.filename,
                line=first_new_line(changed_file.patch),
                body=suggestion,
            ))

        return comments
