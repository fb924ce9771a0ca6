"""
Tests for lint_ai_reviewer/diff_parser.py
"""

from lint_ai_reviewer.diff_parser import HunkHeader, first_new_line, parse_hunk_headers


class TestFirstNewLine:
    """Tests for anchoring on the first hunk."""

    def test_uses_new_file_start(self):
        assert first_new_line("@@ -10,5 +20,6 @@\n context") == 20

    def test_no_patch_defaults_to_one(self):
        assert first_new_line(None) == 1
        assert first_new_line("") == 1

    def test_no_hunk_header_defaults_to_one(self):
        assert first_new_line("Binary files differ") == 1

    def test_first_hunk_wins(self):
        patch = "@@ -1,2 +3,4 @@\n a\n@@ -50,2 +60,4 @@\n b"
        assert first_new_line(patch) == 3

    def test_lengths_optional(self):
        assert first_new_line("@@ -1 +7 @@\n-a\n+b") == 7

    def test_zero_start_uses_default(self):
        assert first_new_line("@@ -1,3 +0,0 @@\n-a\n-b\n-c") == 1

    def test_custom_default(self):
        assert first_new_line(None, default=5) == 5


class TestParseHunkHeaders:
    """Tests for parse_hunk_headers."""

    def test_parses_all_headers(self, sample_patch):
        patch = sample_patch + "@@ -40 +45,2 @@\n+x\n+y\n"
        headers = parse_hunk_headers(patch)

        assert headers == [
            HunkHeader(source_start=10, source_length=5, target_start=20, target_length=6),
            HunkHeader(source_start=40, source_length=1, target_start=45, target_length=2),
        ]

    def test_ignores_at_signs_inside_lines(self):
        patch = "@@ -1,1 +1,1 @@\n+const s = '@@ -9,9 +9,9 @@';"
        assert len(parse_hunk_headers(patch)) == 1

    def test_empty(self):
        assert parse_hunk_headers(None) == []
