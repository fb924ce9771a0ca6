"""
Gemini AI client for the Lint AI Code Reviewer.

This module wraps Google's Gemini completion API: it sends one prompt per
request with the reviewer persona as the system instruction and returns the
plain-text answer.
"""

import logging
from typing import Any, Dict, Optional

import google.generativeai as genai

from .config import GeminiConfig


logger = logging.getLogger(__name__)

# Candidate finish reasons for content withheld by the API
FINISH_REASON_SAFETY = 3
FINISH_REASON_RECITATION = 4


class GeminiClientError(Exception):
    """Base exception for Gemini client errors."""
    pass


class ModelNotAvailableError(GeminiClientError):
    """Exception raised when the specified model is not available."""
    pass


class TokenLimitExceededError(GeminiClientError):
    """Exception raised when token limit is exceeded."""
    pass


class GeminiClient:
    """Gemini completion client with error classification and usage statistics."""

    def __init__(self, config: GeminiConfig, system_instruction: Optional[str] = None):
        """Initialize Gemini client with configuration."""
        self.config = config

        try:
            genai.configure(api_key=config.api_key)
            self._model = genai.GenerativeModel(
                config.model_name,
                system_instruction=system_instruction,
            )
            logger.info(f"Initialized Gemini client with model: {config.model_name}")
        except Exception as e:
            logger.error(f"Failed to initialize Gemini client: {str(e)}")
            raise GeminiClientError(f"Failed to initialize Gemini client: {str(e)}") from e

        self._generation_config = {
            "max_output_tokens": config.max_output_tokens,
            "temperature": config.temperature,
        }

        self._total_requests = 0
        self._successful_requests = 0
        self._failed_requests = 0
        self._total_tokens_used = 0

    def generate_text(self, prompt: str) -> str:
        """Send ``prompt`` and return the trimmed response text.

        Responses withheld for safety or recitation, or carrying no text,
        come back as an empty string.

        Raises:
            GeminiClientError: On any API failure
        """
        self._total_requests += 1
        logger.debug(f"Sending request to Gemini API ({len(prompt)} chars)")

        try:
            response = self._model.generate_content(prompt, generation_config=self._generation_config)
        except Exception as e:
            self._failed_requests += 1
            raise self._classify_error(e) from e

        self._successful_requests += 1
        self._track_usage(response)
        return self._extract_text(response)

    def _extract_text(self, response: Any) -> str:
        if not response:
            return ""

        candidates = getattr(response, 'candidates', None)
        if candidates:
            candidate = candidates[0]
            finish_reason = getattr(candidate, 'finish_reason', None)
            if finish_reason in (FINISH_REASON_SAFETY, FINISH_REASON_RECITATION):
                logger.warning(f"Gemini API response filtered (finish_reason={finish_reason})")
                return ""
            content = getattr(candidate, 'content', None)
            if not content or not getattr(content, 'parts', None):
                logger.warning(f"Response has no valid parts (finish_reason={finish_reason})")
                return ""

        try:
            text = response.text
        except (ValueError, AttributeError) as e:
            # response.text raises ValueError when the candidate has no text part
            logger.warning(f"Could not read response text: {str(e)}")
            return ""

        return (text or "").strip()

    def _track_usage(self, response: Any) -> None:
        usage = getattr(response, 'usage_metadata', None)
        tokens_used = getattr(usage, 'total_token_count', None)
        if isinstance(tokens_used, int):
            self._total_tokens_used += tokens_used
            logger.debug(f"Tokens used: {tokens_used}")

    def _classify_error(self, error: Exception) -> GeminiClientError:
        error_msg = str(error).lower()
        if "quota" in error_msg or "rate limit" in error_msg:
            return GeminiClientError("API rate limit exceeded")
        if "token" in error_msg and "limit" in error_msg:
            return TokenLimitExceededError("Token limit exceeded")
        if "not found" in error_msg and "model" in error_msg:
            return ModelNotAvailableError(f"Model {self.config.model_name} not available")
        return GeminiClientError(f"Gemini API error: {str(error)}")

    def get_statistics(self) -> Dict[str, Any]:
        """Get client usage statistics."""
        success_rate = 0.0
        if self._total_requests > 0:
            success_rate = self._successful_requests / self._total_requests

        return {
            'total_requests': self._total_requests,
            'successful_requests': self._successful_requests,
            'failed_requests': self._failed_requests,
            'success_rate': success_rate,
            'total_tokens_used': self._total_tokens_used,
            'model_name': self.config.model_name
        }

    def close(self):
        """Clean up resources."""
        logger.debug("Gemini client closed")
