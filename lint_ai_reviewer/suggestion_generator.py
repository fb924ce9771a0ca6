"""
AI suggestion generation for the Lint AI Code Reviewer.

Asks the completion service for a review of one file and keeps the answer
only when it actually says something: short replies and "looks good"
style affirmations are dropped so they never become PR noise.
"""

import logging
from typing import Iterable, Optional

from .config import ReviewConfig
from .gemini_client import GeminiClient
from .prompts import build_file_review_prompt


logger = logging.getLogger(__name__)

SUGGESTION_HEADER = "🤖 **AI Code Review**"


def is_actionable_suggestion(
    suggestion: Optional[str],
    min_length: int,
    affirmation_phrases: Iterable[str]
) -> bool:
    """Decide whether a model response is worth posting.

    Args:
        suggestion: Raw response text (may be None)
        min_length: Responses whose trimmed length is at most this are dropped
        affirmation_phrases: Lower-case phrases meaning "no issues"

    Returns:
        True if the response should become a comment
    """
    if not suggestion:
        return False
    text = suggestion.strip()
    if len(text) <= min_length:
        return False
    lowered = text.lower()
    return not any(phrase.lower() in lowered for phrase in affirmation_phrases)


class SuggestionGenerator:
    """Produce at most one AI review comment body per file."""

    def __init__(self, gemini_client: GeminiClient, review_config: ReviewConfig):
        self.gemini_client = gemini_client
        self.config = review_config

    def generate(self, filename: str, content: str, patch: Optional[str] = None) -> Optional[str]:
        """Return a comment body for ``filename``, or None if there is nothing to say.

        Completion failures are logged and treated as "no suggestion".
        """
        prompt = build_file_review_prompt(
            filename, content, patch, max_content_chars=self.config.max_content_chars
        )

        try:
            suggestion = self.gemini_client.generate_text(prompt)
        except Exception as e:
            logger.error(f"Gemini API error for {filename}: {str(e)}")
            return None

        if not is_actionable_suggestion(
            suggestion, self.config.min_suggestion_length, self.config.affirmation_phrases
        ):
            logger.debug(f"No actionable suggestion for {filename}")
            return None

        return f"{SUGGESTION_HEADER}\n\n{suggestion.strip()}"
