"""
Main code reviewer orchestrator for the Lint AI Code Reviewer.

This module contains the CodeReviewer class that runs the review pipeline:
list changed files, filter them, lint them, collect AI suggestions, assemble
the comments and publish them. Every step completes before the next starts.
"""

import logging
import time
from typing import Any, Dict, Optional

from .comment_assembler import CommentAssembler
from .config import Config
from .gemini_client import GeminiClient
from .github_client import GitHubClient, GitHubClientError
from .lint_runner import ESLintRunner
from .models import PRContext, ProcessingStats, PublishOutcome, ReviewResult
from .prompts import SYSTEM_INSTRUCTION
from .review_publisher import ReviewPublisher
from .suggestion_generator import SUGGESTION_HEADER, SuggestionGenerator
from .utils import filter_reviewable_files, read_file_content


logger = logging.getLogger(__name__)


class CodeReviewerError(Exception):
    """Base exception for code reviewer errors."""
    pass


class CodeReviewer:
    """Main orchestrator class for the code review process.

    Collaborators default to real clients built from ``config``; tests pass
    fakes instead.
    """

    def __init__(
        self,
        config: Config,
        github_client: Optional[GitHubClient] = None,
        lint_runner: Optional[ESLintRunner] = None,
        gemini_client: Optional[GeminiClient] = None,
        assembler: Optional[CommentAssembler] = None,
        publisher: Optional[ReviewPublisher] = None
    ):
        """Initialize the code reviewer with configuration."""
        self.config = config

        self.github_client = github_client or GitHubClient(config.github)
        self.lint_runner = lint_runner or ESLintRunner(config.lint)
        self.gemini_client = gemini_client or GeminiClient(config.gemini, SYSTEM_INSTRUCTION)

        if assembler is None:
            generator = SuggestionGenerator(self.gemini_client, config.review)
            base_dir = config.lint.working_directory
            assembler = CommentAssembler(generator, lambda path: read_file_content(path, base_dir))
        self.assembler = assembler
        self.publisher = publisher or ReviewPublisher(self.github_client, config.review)

        self.stats = ProcessingStats()

        logger.info("Initialized CodeReviewer with all components")

    async def review_pull_request(self, pr_context: PRContext) -> ReviewResult:
        """Review one pull request end to end.

        Raises:
            CodeReviewerError: If the changed files cannot be fetched
        """
        logger.info(f"=== Starting review for PR #{pr_context.number} in {pr_context.repo_full_name} ===")
        self.stats = ProcessingStats(start_time=time.time())
        result = ReviewResult(pr_context=pr_context, stats=self.stats)

        try:
            changed_files = self.github_client.get_changed_files(pr_context)
        except GitHubClientError as e:
            logger.error(f"Failed to fetch changed files: {str(e)}")
            raise CodeReviewerError(f"Failed to fetch changed files: {str(e)}") from e
        logger.info(f"Found {len(changed_files)} changed files")

        files = filter_reviewable_files(changed_files, self.config.review.supported_extensions)
        result.files_considered = files
        if not files:
            logger.info("No code files to review")
            return self._finish(result)

        self.stats.files_reviewed = len(files)
        logger.info(f"Reviewing {len(files)} code files")

        findings = self.lint_runner.lint_files([f.filename for f in files])
        result.lint_findings = findings
        reviewed_paths = {f.filename for f in files}
        self.stats.files_with_findings = len(
            {finding.file_path for finding in findings if finding.file_path in reviewed_paths}
        )
        logger.info(f"ESLint reported {len(findings)} findings")

        comments = self.assembler.assemble(files, findings)
        result.comments = comments
        self.stats.suggestions_generated = sum(
            1 for comment in comments if comment.body.startswith(SUGGESTION_HEADER)
        )
        self.stats.lint_errors = len(comments) - self.stats.suggestions_generated

        result.outcome = self.publisher.publish(pr_context, comments)
        if result.outcome == PublishOutcome.INDIVIDUAL_COMMENTS:
            self.stats.errors_encountered += 1

        logger.info(f"Review completed! Posted {len(comments)} comments ({result.outcome.value})")
        return self._finish(result)

    def _finish(self, result: ReviewResult) -> ReviewResult:
        self.stats.end_time = time.time()
        logger.info(f"Review finished in {self.stats.duration:.2f}s")
        return result

    def get_statistics(self) -> Dict[str, Any]:
        """Get processing statistics for the last run."""
        return {
            'processing': {
                'duration': self.stats.duration,
                'files_reviewed': self.stats.files_reviewed,
                'files_with_findings': self.stats.files_with_findings,
                'lint_errors': self.stats.lint_errors,
                'suggestions_generated': self.stats.suggestions_generated,
                'errors_encountered': self.stats.errors_encountered,
            },
            'gemini': self.gemini_client.get_statistics(),
        }

    def close(self):
        """Clean up resources."""
        logger.info("Cleaning up CodeReviewer resources...")

        for client in (self.github_client, self.gemini_client):
            try:
                client.close()
            except Exception as e:
                logger.warning(f"Error during cleanup: {str(e)}")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
