"""
Tests for lint_ai_reviewer/validators.py
"""

import pytest

from lint_ai_reviewer.validators import (
    validate_extensions,
    validate_gemini_api_key_format,
    validate_github_token_format,
    validate_non_negative_int,
    validate_positive_int,
    validate_range,
    validate_required_string,
)


class TestValidators:
    """Tests for the raising validators."""

    def test_required_string(self):
        validate_required_string("value", "Field")
        with pytest.raises(ValueError, match="Field is required"):
            validate_required_string("", "Field")

    def test_positive_int(self):
        validate_positive_int(1, "count")
        with pytest.raises(ValueError):
            validate_positive_int(0, "count")

    def test_non_negative_int(self):
        validate_non_negative_int(0, "count")
        with pytest.raises(ValueError):
            validate_non_negative_int(-1, "count")

    def test_range(self):
        validate_range(0.3, 0.0, 2.0, "Temperature")
        with pytest.raises(ValueError, match="between"):
            validate_range(2.5, 0.0, 2.0, "Temperature")

    def test_extensions(self):
        validate_extensions([".ts", ".jsx"], "exts")

    @pytest.mark.parametrize("extensions", [[], ["ts"], ["."]])
    def test_invalid_extensions(self, extensions):
        with pytest.raises(ValueError):
            validate_extensions(extensions, "exts")


class TestFormatChecks:
    """Tests for credential format checks."""

    @pytest.mark.parametrize("token", ["a" * 40, "ghp_abc123", "ghs_abc", "github_pat_11ABC"])
    def test_valid_github_tokens(self, token):
        assert validate_github_token_format(token)

    @pytest.mark.parametrize("token", ["", None, "short", "x" * 39])
    def test_invalid_github_tokens(self, token):
        assert not validate_github_token_format(token)

    def test_gemini_key(self):
        assert validate_gemini_api_key_format("AIzaSyTestKey123456")
        assert not validate_gemini_api_key_format("short")
