"""
Tests for lint_ai_reviewer/review_publisher.py
"""

import pytest
from unittest.mock import Mock

from lint_ai_reviewer.config import ReviewConfig
from lint_ai_reviewer.github_client import GitHubClientError
from lint_ai_reviewer.models import PublishOutcome, ReviewComment
from lint_ai_reviewer.review_publisher import (
    NO_ISSUES_MESSAGE,
    ReviewPublisher,
    format_fallback_comment,
    format_review_body,
)


def make_comments(count):
    return [ReviewComment(path=f"src/f{i}.ts", line=i, body=f"comment {i}") for i in range(1, count + 1)]


class TestFormatting:
    """Tests for message formatting helpers."""

    def test_review_body_states_count(self):
        assert "Found 15 items for review" in format_review_body(15)

    def test_fallback_comment_prefixed_with_location(self):
        comment = ReviewComment("src/a.ts", 12, "Fix it")
        assert format_fallback_comment(comment) == "**src/a.ts:12**\n\nFix it"


class TestReviewPublisher:
    """Tests for ReviewPublisher class."""

    @pytest.fixture
    def github_client(self):
        return Mock()

    @pytest.fixture
    def publisher(self, github_client):
        return ReviewPublisher(github_client, ReviewConfig())

    def test_empty_posts_single_general_comment(self, publisher, github_client, pr_context):
        outcome = publisher.publish(pr_context, [])

        assert outcome == PublishOutcome.GENERAL_COMMENT
        github_client.create_issue_comment.assert_called_once_with(pr_context, NO_ISSUES_MESSAGE)
        github_client.create_review.assert_not_called()

    def test_empty_general_comment_failure_propagates(self, publisher, github_client, pr_context):
        github_client.create_issue_comment.side_effect = GitHubClientError("forbidden")

        with pytest.raises(GitHubClientError):
            publisher.publish(pr_context, [])

    def test_batched_review(self, publisher, github_client, pr_context):
        comments = make_comments(3)

        outcome = publisher.publish(pr_context, comments)

        assert outcome == PublishOutcome.BATCHED_REVIEW
        github_client.create_review.assert_called_once_with(
            pr_context, comments, format_review_body(3), event="COMMENT"
        )
        github_client.create_issue_comment.assert_not_called()

    def test_fallback_capped_at_ten(self, publisher, github_client, pr_context):
        github_client.create_review.side_effect = GitHubClientError("Unprocessable Entity")
        comments = make_comments(15)

        outcome = publisher.publish(pr_context, comments)

        assert outcome == PublishOutcome.INDIVIDUAL_COMMENTS
        assert github_client.create_issue_comment.call_count == 10
        posted = [c.args[1] for c in github_client.create_issue_comment.call_args_list]
        assert posted == [format_fallback_comment(c) for c in comments[:10]]

    def test_fallback_continues_after_individual_failure(self, publisher, github_client, pr_context):
        github_client.create_review.side_effect = GitHubClientError("Unprocessable Entity")
        github_client.create_issue_comment.side_effect = [
            None, None, GitHubClientError("boom"), None, None, None, None, None, None, None,
        ]

        outcome = publisher.publish(pr_context, make_comments(15))

        assert outcome == PublishOutcome.INDIVIDUAL_COMMENTS
        assert github_client.create_issue_comment.call_count == 10
        last_body = github_client.create_issue_comment.call_args_list[-1].args[1]
        assert last_body.startswith("**src/f10.ts:10**")

    def test_fallback_all_failing_does_not_raise(self, publisher, github_client, pr_context):
        github_client.create_review.side_effect = GitHubClientError("Unprocessable Entity")
        github_client.create_issue_comment.side_effect = GitHubClientError("down")

        outcome = publisher.publish(pr_context, make_comments(4))

        assert outcome == PublishOutcome.INDIVIDUAL_COMMENTS
        assert github_client.create_issue_comment.call_count == 4

    def test_fallback_cap_configurable(self, github_client, pr_context):
        publisher = ReviewPublisher(github_client, ReviewConfig(max_fallback_comments=2))
        github_client.create_review.side_effect = RuntimeError("transport error")

        publisher.publish(pr_context, make_comments(5))

        assert github_client.create_issue_comment.call_count == 2
