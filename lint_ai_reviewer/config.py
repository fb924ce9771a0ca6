"""
Configuration management for the Lint AI Code Reviewer.

This module turns the GitHub Actions environment into validated configuration
objects. Credentials and the pull request context are required; everything
else has a default matching the behaviour of the action's original release.
"""

import json
import logging
import shlex
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .env_reader import (
    get_env_str, get_env_int, get_env_float, get_env_bool, get_env_list,
    get_env_enum, get_env_optional_int
)
from .models import PRContext
from .validators import (
    validate_required_string, validate_positive_int, validate_non_negative_int,
    validate_range, validate_extensions, validate_github_token_format,
    validate_gemini_api_key_format
)


logger = logging.getLogger(__name__)


DEFAULT_SUPPORTED_EXTENSIONS = [".ts", ".js", ".tsx", ".jsx"]
DEFAULT_AFFIRMATION_PHRASES = ["looks good"]
DEFAULT_LINT_COMMAND = "npx eslint"


class LogLevel(Enum):
    """Available log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass
class GitHubConfig:
    """Configuration for GitHub integration."""
    token: str
    api_base_url: str = "https://api.github.com"
    timeout: int = 30

    def __post_init__(self):
        validate_required_string(self.token, "GitHub token")
        if not validate_github_token_format(self.token):
            raise ValueError("Invalid GitHub token format")
        validate_positive_int(self.timeout, "GitHub timeout")


@dataclass
class GeminiConfig:
    """Configuration for the Gemini completion service."""
    api_key: str
    model_name: str = "gemini-2.5-flash"
    max_output_tokens: int = 500
    temperature: float = 0.3  # Low temperature keeps feedback focused

    def __post_init__(self):
        validate_required_string(self.api_key, "Gemini API key")
        if not validate_gemini_api_key_format(self.api_key):
            raise ValueError("Invalid Gemini API key format")
        validate_required_string(self.model_name, "Gemini model name")
        validate_positive_int(self.max_output_tokens, "max_output_tokens")
        validate_range(self.temperature, 0.0, 2.0, "Temperature")


@dataclass
class ReviewConfig:
    """Configuration for which files are reviewed and how comments are filtered."""
    supported_extensions: List[str] = field(default_factory=lambda: list(DEFAULT_SUPPORTED_EXTENSIONS))
    max_content_chars: int = 3000
    min_suggestion_length: int = 50
    affirmation_phrases: List[str] = field(default_factory=lambda: list(DEFAULT_AFFIRMATION_PHRASES))
    max_fallback_comments: int = 10

    def __post_init__(self):
        validate_extensions(self.supported_extensions, "supported_extensions")
        validate_positive_int(self.max_content_chars, "max_content_chars")
        validate_non_negative_int(self.min_suggestion_length, "min_suggestion_length")
        validate_positive_int(self.max_fallback_comments, "max_fallback_comments")
        self.affirmation_phrases = [p.lower() for p in self.affirmation_phrases if p.strip()]


@dataclass
class LintConfig:
    """Configuration for the ESLint subprocess."""
    command: List[str] = field(default_factory=lambda: shlex.split(DEFAULT_LINT_COMMAND))
    timeout: int = 120
    working_directory: Optional[str] = None

    def __post_init__(self):
        if not self.command:
            raise ValueError("Lint command is required")
        validate_positive_int(self.timeout, "Lint timeout")


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: LogLevel = LogLevel.INFO
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
    enable_file_logging: bool = False
    log_file_path: str = "lint_ai_reviewer.log"
    max_log_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 3


@dataclass
class Config:
    """Main configuration class that combines all configuration sections."""
    github: GitHubConfig
    gemini: GeminiConfig
    review: ReviewConfig = field(default_factory=ReviewConfig)
    lint: LintConfig = field(default_factory=LintConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_environment(cls) -> 'Config':
        """Create configuration from environment variables."""
        github_token = get_env_str("GITHUB_TOKEN", "", "INPUT_GITHUB_TOKEN")
        gemini_api_key = get_env_str("GEMINI_API_KEY", "", "INPUT_GEMINI_API_KEY")

        if not github_token:
            raise ValueError("GITHUB_TOKEN environment variable is required")
        if not gemini_api_key:
            raise ValueError("GEMINI_API_KEY environment variable is required")

        github_config = GitHubConfig(
            token=github_token,
            api_base_url=get_env_str("GITHUB_API_URL", "https://api.github.com"),
            timeout=get_env_int("GITHUB_TIMEOUT", 30)
        )

        gemini_config = GeminiConfig(
            api_key=gemini_api_key,
            model_name=get_env_str("GEMINI_MODEL", "gemini-2.5-flash", "INPUT_GEMINI_MODEL"),
            max_output_tokens=get_env_int("GEMINI_MAX_TOKENS", 500),
            temperature=get_env_float("GEMINI_TEMPERATURE", 0.3)
        )

        review_config = ReviewConfig(
            supported_extensions=(
                get_env_list("SUPPORTED_EXTENSIONS", ",", "INPUT_SUPPORTED_EXTENSIONS")
                or list(DEFAULT_SUPPORTED_EXTENSIONS)
            ),
            max_content_chars=get_env_int("MAX_CONTENT_CHARS", 3000),
            min_suggestion_length=get_env_int("MIN_SUGGESTION_LENGTH", 50),
            affirmation_phrases=(
                get_env_list("AFFIRMATION_PHRASES", ",")
                or list(DEFAULT_AFFIRMATION_PHRASES)
            ),
            max_fallback_comments=get_env_int("MAX_FALLBACK_COMMENTS", 10, "INPUT_MAX_FALLBACK_COMMENTS")
        )

        lint_config = LintConfig(
            command=shlex.split(get_env_str("LINT_COMMAND", DEFAULT_LINT_COMMAND, "INPUT_LINT_COMMAND")),
            timeout=get_env_int("LINT_TIMEOUT", 120),
            working_directory=get_env_str("GITHUB_WORKSPACE") or None
        )

        logging_config = LoggingConfig(
            level=get_env_enum("LOG_LEVEL", LogLevel, LogLevel.INFO),
            enable_file_logging=get_env_bool("ENABLE_FILE_LOGGING", False),
            log_file_path=get_env_str("LOG_FILE_PATH", "lint_ai_reviewer.log")
        )

        return cls(
            github=github_config,
            gemini=gemini_config,
            review=review_config,
            lint=lint_config,
            logging=logging_config
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary without credentials."""
        return {
            "github": {
                "api_base_url": self.github.api_base_url,
                "timeout": self.github.timeout,
            },
            "gemini": {
                "model_name": self.gemini.model_name,
                "max_output_tokens": self.gemini.max_output_tokens,
                "temperature": self.gemini.temperature,
            },
            "review": {
                "supported_extensions": self.review.supported_extensions,
                "max_content_chars": self.review.max_content_chars,
                "min_suggestion_length": self.review.min_suggestion_length,
                "affirmation_phrases": self.review.affirmation_phrases,
                "max_fallback_comments": self.review.max_fallback_comments,
            },
            "lint": {
                "command": self.lint.command,
                "timeout": self.lint.timeout,
            },
            "logging": {
                "level": self.logging.level.value,
                "enable_file_logging": self.logging.enable_file_logging,
            }
        }


def _pr_number_from_event(event_path: str) -> Optional[int]:
    """Read the pull request number from a GitHub Actions event payload."""
    try:
        with open(event_path, "r") as f:
            event_data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to load GitHub event data from {event_path}: {str(e)}")
        return None

    if not isinstance(event_data, dict):
        logger.warning(f"Unexpected GitHub event payload in {event_path}")
        return None

    pull_request = event_data.get("pull_request")
    if isinstance(pull_request, dict) and "number" in pull_request:
        return pull_request["number"]
    issue = event_data.get("issue")
    if isinstance(issue, dict) and "pull_request" in issue:
        return issue.get("number")
    return event_data.get("number")


def pr_context_from_environment() -> PRContext:
    """Build the pull request context from the Actions environment.

    The number comes from GITHUB_PR_NUMBER (or PR_NUMBER / INPUT_PR_NUMBER),
    falling back to the payload at GITHUB_EVENT_PATH.

    Raises:
        ValueError: If the repository or pull request number is missing
    """
    repository = get_env_str("GITHUB_REPOSITORY")
    pr_number = get_env_optional_int("GITHUB_PR_NUMBER", "PR_NUMBER", "INPUT_PR_NUMBER")

    if pr_number is None:
        event_path = get_env_str("GITHUB_EVENT_PATH")
        if event_path:
            pr_number = _pr_number_from_event(event_path)

    if not repository or not pr_number:
        raise ValueError("Missing GitHub context variables: GITHUB_REPOSITORY and GITHUB_PR_NUMBER")

    return PRContext.from_repository_slug(repository, pr_number)
