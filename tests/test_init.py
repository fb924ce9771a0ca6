"""
Tests for lint_ai_reviewer/__init__.py
"""

import pytest


class TestPackageExports:
    """Tests for the lazy package exports."""

    def test_version(self):
        from lint_ai_reviewer import __version__
        assert __version__ == "1.0.0"

    def test_all_exports_resolve(self):
        import lint_ai_reviewer
        for name in lint_ai_reviewer.__all__:
            assert getattr(lint_ai_reviewer, name) is not None

    def test_lazy_model_import(self):
        import lint_ai_reviewer
        from lint_ai_reviewer.models import ReviewComment
        assert lint_ai_reviewer.ReviewComment is ReviewComment

    def test_unknown_attribute(self):
        import lint_ai_reviewer
        with pytest.raises(AttributeError):
            lint_ai_reviewer.DoesNotExist
