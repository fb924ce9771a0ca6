"""
Review publisher for the Lint AI Code Reviewer.

Delivers the assembled comments to the pull request. The normal path is a
single COMMENT review carrying every inline comment; when GitHub rejects it
(typically because a line is not part of the diff) the comments are posted
one by one on the conversation instead, up to a fixed cap.
"""

import logging
from typing import List

from .config import ReviewConfig
from .github_client import GitHubClient
from .models import PRContext, PublishOutcome, ReviewComment


logger = logging.getLogger(__name__)

NO_ISSUES_MESSAGE = (
    "✅ **AI Code Review Complete**\n\n"
    "No major issues found! The code looks good to me. 🚀"
)


def format_review_body(total_comments: int) -> str:
    """Summary shown at the top of the batched review."""
    return (
        "🤖 **Automated Code Review Results**\n\n"
        f"Found {total_comments} items for review. Please check the inline comments below."
    )


def format_fallback_comment(comment: ReviewComment) -> str:
    """Body of a standalone comment, prefixed with its location."""
    return f"**{comment.path}:{comment.line}**\n\n{comment.body}"


class ReviewPublisher:
    """Posts review comments to a pull request."""

    def __init__(self, github_client: GitHubClient, review_config: ReviewConfig):
        self.github_client = github_client
        self.max_fallback_comments = review_config.max_fallback_comments

    def publish(self, pr_context: PRContext, comments: List[ReviewComment]) -> PublishOutcome:
        """Publish ``comments`` and report which delivery path was used.

        Raises:
            GitHubClientError: Only if the "no issues" comment cannot be posted
        """
        if not comments:
            logger.info("No issues found - posting a general comment")
            self.github_client.create_issue_comment(pr_context, NO_ISSUES_MESSAGE)
            return PublishOutcome.GENERAL_COMMENT

        try:
            self.github_client.create_review(
                pr_context, comments, format_review_body(len(comments)), event="COMMENT"
            )
            return PublishOutcome.BATCHED_REVIEW
        except Exception as e:
            logger.error(f"Failed to create review, posting individual comments: {str(e)}")

        self._post_individually(pr_context, comments)
        return PublishOutcome.INDIVIDUAL_COMMENTS

    def _post_individually(self, pr_context: PRContext, comments: List[ReviewComment]) -> int:
        """Post up to ``max_fallback_comments`` standalone comments, returning how many succeeded."""
        to_post = comments[:self.max_fallback_comments]
        if len(comments) > len(to_post):
            logger.warning(
                f"Posting only the first {len(to_post)} of {len(comments)} comments individually"
            )

        posted = 0
        for comment in to_post:
            try:
                self.github_client.create_issue_comment(pr_context, format_fallback_comment(comment))
                posted += 1
            except Exception as e:
                logger.error(f"Failed to post comment for {comment.path}: {str(e)}")

        logger.info(f"Posted {posted}/{len(to_post)} individual comments")
        return posted
