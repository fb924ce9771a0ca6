"""
Pytest configuration and fixtures for lint_ai_reviewer tests.
"""

import os
import sys

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lint_ai_reviewer.models import ChangedFile, FileStatus, LintFinding, LintSeverity, PRContext


@pytest.fixture
def pr_context():
    """Provide a sample pull request context."""
    return PRContext(owner="owner", repo="repo", number=123)


@pytest.fixture
def sample_patch():
    """Provide a sample unified diff fragment."""
    return """@@ -10,5 +20,6 @@ export function greet(name) {
   const greeting = 'Hello';
-  return greeting + name;
+  const message = `${greeting}, ${name}`;
+  return message;
 }
"""


@pytest.fixture
def changed_files(sample_patch):
    """Provide a mixed set of changed files as GitHub would list them."""
    return [
        ChangedFile("src/app.ts", FileStatus.MODIFIED, sample_patch),
        ChangedFile("README.md", FileStatus.MODIFIED, "@@ -1 +1 @@\n-a\n+b"),
        ChangedFile("src/old.js", FileStatus.REMOVED, None),
        ChangedFile("src/view.tsx", FileStatus.ADDED, "@@ -0,0 +1,3 @@\n+a\n+b\n+c"),
    ]


@pytest.fixture
def lint_findings():
    """Provide findings with both errors and warnings."""
    return [
        LintFinding("src/app.ts", LintSeverity.ERROR, "'x' is not defined.", 3, 5, "no-undef"),
        LintFinding("src/app.ts", LintSeverity.WARNING, "Unexpected console statement.", 7, 1, "no-console"),
        LintFinding("src/view.tsx", LintSeverity.ERROR, "Parsing error: Unexpected token", 2, 1, None),
    ]


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch):
    """Reset environment variables for each test."""
    for key in list(os.environ.keys()):
        if key.startswith(("GITHUB_", "GEMINI_", "INPUT_", "LINT_", "LOG_")) or key in (
            "PR_NUMBER", "SUPPORTED_EXTENSIONS", "MAX_CONTENT_CHARS", "MIN_SUGGESTION_LENGTH",
            "MAX_FALLBACK_COMMENTS", "AFFIRMATION_PHRASES", "ENABLE_FILE_LOGGING",
        ):
            monkeypatch.delenv(key, raising=False)
