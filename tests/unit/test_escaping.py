"""Tests for MDX escaping."""

from docprep.markdown.escaping import escape_mdx


class TestLessThan:
    def test_bare_less_than_is_escaped(self):
        assert escape_mdx("Latency < 50ms") == "Latency \\< 50ms"

    def test_less_than_before_digit_is_escaped(self):
        assert escape_mdx("<50ms p99") == "\\<50ms p99"

    def test_tags_are_left_alone(self):
        assert escape_mdx("<div>text</div>") == "<div>text</div>"

    def test_comments_are_left_alone(self):
        assert escape_mdx("<!-- note -->") == "<!-- note -->"

    def test_arrow_is_escaped(self):
        assert escape_mdx("A <-> B") == "A \\<-> B"


class TestBraces:
    def test_braces_are_escaped(self):
        assert escape_mdx("keyed by {region}") == "keyed by \\{region\\}"

    def test_multiple_spans(self):
        assert escape_mdx("{a} and {b}") == "\\{a\\} and \\{b\\}"

    def test_empty_braces_are_untouched(self):
        assert escape_mdx("an empty {} object") == "an empty {} object"


class TestCodeRegions:
    def test_inline_code_is_preserved(self):
        text = "Uses `{x}` and `a < b` inline"
        assert escape_mdx(text) == text

    def test_fenced_block_is_preserved(self):
        block = "```ts\nconst m = new Map<string, {id: number}>();\nif (a < 5) {}\n```"
        text = f"Before {{y}}\n\n{block}\n\nAfter <3"
        result = escape_mdx(text)
        assert block in result
        assert result.startswith("Before \\{y\\}")
        assert result.endswith("After \\<3")

    def test_many_code_regions_restore_in_place(self):
        spans = [f"`{{v{i}}}`" for i in range(12)]
        text = " | ".join(spans)
        assert escape_mdx(text) == text

    def test_mixed_content(self):
        text = "# Design\n\nUses `{x}` and <5 items.\n\nRegions are keyed by {y}.\n"
        expected = "# Design\n\nUses `{x}` and \\<5 items.\n\nRegions are keyed by \\{y\\}.\n"
        assert escape_mdx(text) == expected
