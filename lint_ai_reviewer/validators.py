"""
Validation helpers used by the configuration dataclasses.
"""

from typing import Iterable


def validate_required_string(value: str, field_name: str) -> None:
    """Raise ValueError if a required string is empty.

    Args:
        value: The string value to validate
        field_name: Name of the field for error messages

    Raises:
        ValueError: If the value is empty
    """
    if not value:
        raise ValueError(f"{field_name} is required")


def validate_positive_int(value: int, field_name: str) -> None:
    """Raise ValueError unless ``value`` is an integer greater than zero."""
    if not isinstance(value, int) or value <= 0:
        raise ValueError(f"{field_name} must be positive")


def validate_non_negative_int(value: int, field_name: str) -> None:
    """Raise ValueError if ``value`` is negative."""
    if not isinstance(value, int) or value < 0:
        raise ValueError(f"{field_name} must not be negative")


def validate_range(value: float, min_val: float, max_val: float, field_name: str) -> None:
    """Raise ValueError if ``value`` lies outside ``[min_val, max_val]``."""
    if not min_val <= value <= max_val:
        raise ValueError(f"{field_name} must be between {min_val} and {max_val}")


def validate_extensions(extensions: Iterable[str], field_name: str) -> None:
    """Raise ValueError unless every entry looks like ``.ext``."""
    extensions = list(extensions)
    if not extensions:
        raise ValueError(f"{field_name} must not be empty")
    for extension in extensions:
        if not extension.startswith(".") or len(extension) < 2:
            raise ValueError(f"{field_name} contains invalid extension: {extension!r}")


def validate_github_token_format(token: str) -> bool:
    """Check that a token looks like a GitHub token.

    Classic tokens are 40 hex characters; newer tokens carry a type prefix.
    """
    if not token or not isinstance(token, str):
        return False
    return len(token) == 40 or token.startswith(('ghp_', 'ghs_', 'gho_', 'ghu_', 'github_pat_'))


def validate_gemini_api_key_format(api_key: str) -> bool:
    """Check that a Gemini API key is plausibly long enough."""
    if not api_key or not isinstance(api_key, str):
        return False
    return len(api_key) > 10
