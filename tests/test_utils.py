"""
Tests for lint_ai_reviewer/utils.py
"""

from lint_ai_reviewer.models import ChangedFile, FileStatus
from lint_ai_reviewer.utils import (
    filter_reviewable_files,
    get_file_extension,
    has_supported_extension,
    read_file_content,
    truncate_content,
)

EXTENSIONS = [".ts", ".js", ".tsx", ".jsx"]


class TestExtensions:
    """Tests for extension helpers."""

    def test_get_file_extension(self):
        assert get_file_extension("src/app.component.ts") == ".ts"
        assert get_file_extension("Makefile") == ""

    def test_has_supported_extension(self):
        assert has_supported_extension("src/a.tsx", EXTENSIONS)
        assert not has_supported_extension("src/a.json", EXTENSIONS)
        assert not has_supported_extension("src/a.ts.snap", EXTENSIONS)


class TestFilterReviewableFiles:
    """Tests for filter_reviewable_files."""

    def test_keeps_supported_non_removed_in_order(self, changed_files):
        kept = filter_reviewable_files(changed_files, EXTENSIONS)
        assert [f.filename for f in kept] == ["src/app.ts", "src/view.tsx"]

    def test_renamed_files_kept(self):
        files = [ChangedFile("src/new.js", FileStatus.RENAMED)]
        assert filter_reviewable_files(files, EXTENSIONS) == files

    def test_nothing_reviewable(self):
        files = [
            ChangedFile("docs/guide.md", FileStatus.ADDED),
            ChangedFile("src/gone.ts", FileStatus.REMOVED),
        ]
        assert filter_reviewable_files(files, EXTENSIONS) == []

    def test_empty_input(self):
        assert filter_reviewable_files([], EXTENSIONS) == []


class TestTruncateContent:
    """Tests for truncate_content."""

    def test_short_content_unchanged(self):
        assert truncate_content("abc", 3000) == "abc"

    def test_exact_budget_unchanged(self):
        content = "x" * 3000
        assert truncate_content(content, 3000) == content

    def test_long_content_marked(self):
        content = "a" * 3000 + "b" * 10
        truncated = truncate_content(content, 3000)
        assert truncated == "a" * 3000 + " ..."
        assert "b" not in truncated


class TestReadFileContent:
    """Tests for read_file_content."""

    def test_reads_relative_to_base_dir(self, tmp_path):
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "a.js").write_text("const a = 1;\n")
        assert read_file_content("src/a.js", str(tmp_path)) == "const a = 1;\n"

    def test_missing_file_returns_none(self, tmp_path):
        assert read_file_content("nope.js", str(tmp_path)) is None

