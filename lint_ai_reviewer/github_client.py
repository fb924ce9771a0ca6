"""
GitHub API client for the Lint AI Code Reviewer.

This module handles all GitHub API interactions: listing the files changed by
a pull request, creating a batched review and posting standalone comments on
the pull request conversation.
"""

import logging
from typing import Any, List

from github import Auth, Github, GithubException

from .config import GitHubConfig
from .models import ChangedFile, PRContext, ReviewComment


logger = logging.getLogger(__name__)


class GitHubClientError(Exception):
    """Base exception for GitHub client errors."""
    pass


class PRNotFoundError(GitHubClientError):
    """Exception raised when PR is not found."""
    pass


class GitHubClient:
    """Thin wrapper around PyGithub for the calls the reviewer needs.

    Calls are made once; failures are wrapped in GitHubClientError and it is
    up to the caller to decide whether they are fatal.
    """

    def __init__(self, config: GitHubConfig):
        """Initialize GitHub client with configuration."""
        self.config = config
        self._client = Github(
            auth=Auth.Token(config.token),
            base_url=config.api_base_url,
            timeout=config.timeout,
        )
        logger.info("Initialized GitHub client")

    def _get_pull_request(self, pr_context: PRContext) -> Any:
        """Fetch the PyGithub PullRequest object for ``pr_context``."""
        logger.debug(f"Fetching PR {pr_context.repo_full_name}#{pr_context.number}")
        try:
            repo = self._client.get_repo(pr_context.repo_full_name)
            return repo.get_pull(pr_context.number)
        except GithubException as e:
            if e.status == 404:
                raise PRNotFoundError(
                    f"PR #{pr_context.number} not found in {pr_context.repo_full_name}"
                ) from e
            raise GitHubClientError(f"Failed to get PR #{pr_context.number}: {str(e)}") from e

    def get_changed_files(self, pr_context: PRContext) -> List[ChangedFile]:
        """List the files changed by the pull request, in GitHub's order."""
        try:
            pr = self._get_pull_request(pr_context)
            files = [ChangedFile.from_github_file(f) for f in pr.get_files()]
        except GitHubClientError:
            raise
        except Exception as e:
            logger.error(f"Failed to get PR files: {str(e)}")
            raise GitHubClientError(f"Failed to get PR files: {str(e)}") from e

        logger.info(f"Retrieved {len(files)} files from PR #{pr_context.number}")
        return files

    def create_review(
        self,
        pr_context: PRContext,
        comments: List[ReviewComment],
        body: str,
        event: str = "COMMENT"
    ) -> None:
        """Create a single review carrying all inline ``comments``.

        Raises:
            GitHubClientError: If GitHub rejects the review, for example when a
                comment points at a line outside the diff.
        """
        logger.info(
            f"Creating review with {len(comments)} comments for PR #{pr_context.number} (event: {event})"
        )
        try:
            pr = self._get_pull_request(pr_context)
            review = pr.create_review(
                body=body,
                event=event,
                comments=[comment.to_github_dict() for comment in comments],
            )
        except Exception as e:
            logger.error(f"Failed to create review: {str(e)}")
            raise GitHubClientError(f"Failed to create review: {str(e)}") from e

        logger.info(f"✅ Review created successfully with ID: {review.id}")

    def create_issue_comment(self, pr_context: PRContext, body: str) -> None:
        """Post a comment on the pull request conversation (not anchored to a line)."""
        try:
            pr = self._get_pull_request(pr_context)
            pr.create_issue_comment(body)
        except Exception as e:
            raise GitHubClientError(f"Failed to post comment: {str(e)}") from e

        logger.debug(f"Posted issue comment on PR #{pr_context.number}")

    def close(self):
        """Clean up resources."""
        self._client.close()
        logger.debug("GitHub client closed")
