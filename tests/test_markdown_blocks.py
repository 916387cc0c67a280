"""
Tests for the Markdown block parser
"""

import pytest
from pydantic import ValidationError

from learning_roadmap.utils.markdown_blocks import (
    Heading,
    OrderedList,
    Paragraph,
    UnorderedList,
    parse_block,
    parse_markdown,
    render_html,
)


class TestEmptyInput:
    """Empty and whitespace-only input"""

    @pytest.mark.parametrize("raw", ["", "   ", "\n\n\n", " \t\n "])
    def test_no_blocks(self, raw):
        assert parse_markdown(raw) == []

    def test_blank_segments_are_skipped(self):
        blocks = parse_markdown("first\n\n   \n\nsecond")
        assert blocks == [Paragraph(text="first"), Paragraph(text="second")]

    def test_parse_block_empty_segment(self):
        assert parse_block("  \n ") is None


class TestHeadings:
    """Heading classification"""

    def test_level_one(self):
        assert parse_markdown("# Title") == [Heading(level=1, text="Title")]

    @pytest.mark.parametrize("level", [1, 2, 3, 4])
    def test_all_levels(self, level):
        blocks = parse_markdown("#" * level + " Section")
        assert blocks == [Heading(level=level, text="Section")]

    def test_level_five_is_a_paragraph(self):
        assert parse_markdown("##### Too deep") == [Paragraph(text="##### Too deep")]

    def test_marker_needs_a_space(self):
        assert parse_markdown("#Title") == [Paragraph(text="#Title")]

    def test_heading_swallows_rest_of_segment(self):
        blocks = parse_markdown("#### Step 1\n- a\n- b")
        assert blocks == [Heading(level=4, text="Step 1\n- a\n- b")]

    def test_blank_line_separates_heading_and_list(self):
        blocks = parse_markdown("#### Step 1\n\n- a\n- b")
        assert blocks == [
            Heading(level=4, text="Step 1"),
            UnorderedList(items=["a", "b"]),
        ]

    def test_heading_has_no_inline_formatting(self):
        block = parse_markdown("## **Bold** & <b>")[0]
        assert block.text == "**Bold** & <b>"
        assert block.html == "**Bold** &amp; &lt;b&gt;"


class TestLists:
    """Unordered and ordered list classification"""

    def test_dash_list(self):
        assert parse_markdown("- a\n- b") == [UnorderedList(items=["a", "b"])]

    def test_star_list(self):
        assert parse_markdown("* one\n* two") == [UnorderedList(items=["one", "two"])]

    def test_mixed_markers(self):
        assert parse_markdown("- a\n* b") == [UnorderedList(items=["a", "b"])]

    def test_line_without_marker_is_kept(self):
        assert parse_markdown("- a\ncontinued") == [UnorderedList(items=["a", "continued"])]

    def test_ordered_list(self):
        assert parse_markdown("1. First\n2. Second") == [
            OrderedList(items=["First", "Second"])
        ]

    def test_multi_digit_numbers(self):
        assert parse_markdown("10. Ten\n11. Eleven") == [OrderedList(items=["Ten", "Eleven"])]

    def test_only_ascii_digits_start_an_ordered_list(self):
        # Arabic-Indic and fullwidth digits
        assert parse_markdown("١. واحد") == [Paragraph(text="١. واحد")]
        assert parse_markdown("１. first") == [Paragraph(text="１. first")]

    def test_decimal_number_is_a_paragraph(self):
        assert parse_markdown("1.5 million users") == [Paragraph(text="1.5 million users")]

    def test_list_items_get_inline_formatting(self):
        block = parse_markdown("- **목표**: `pytest` 익히기")[0]
        assert block.items == ["**목표**: `pytest` 익히기"]
        assert block.items_html == ["<strong>목표</strong>: <code>pytest</code> 익히기"]

    def test_reparse_unordered_items(self):
        block = parse_markdown("- alpha\n- **beta**\n- gamma")[0]
        rebuilt = "\n".join(f"- {item}" for item in block.items)
        assert parse_markdown(rebuilt) == [block]

    def test_reparse_ordered_items(self):
        block = parse_markdown("1. alpha\n2. beta")[0]
        rebuilt = "\n".join(f"{n}. {item}" for n, item in enumerate(block.items, 1))
        assert parse_markdown(rebuilt) == [block]


class TestParagraphs:
    """Paragraph fallback"""

    def test_plain_text_is_trimmed(self):
        assert parse_markdown("  hello world  \n") == [Paragraph(text="hello world")]

    def test_single_newlines_stay_in_one_paragraph(self):
        assert parse_markdown("line one\nline two") == [Paragraph(text="line one\nline two")]

    def test_runs_of_blank_lines_are_one_separator(self):
        assert parse_markdown("a\n\n\n\nb") == [Paragraph(text="a"), Paragraph(text="b")]

    def test_inline_spans(self):
        block = parse_markdown("This is **bold** and `code`.")[0]
        assert isinstance(block, Paragraph)
        assert block.text == "This is **bold** and `code`."
        assert block.html == "This is <strong>bold</strong> and <code>code</code>."

    def test_model_output_is_escaped(self):
        block = parse_markdown("<img src=x onerror=alert(1)> **hi**")[0]
        assert block.html == "&lt;img src=x onerror=alert(1)&gt; <strong>hi</strong>"

    @pytest.mark.parametrize("raw", ["**", "`", "- ", "1.", "#", "\n- \n", "####", "* "])
    def test_malformed_markdown_never_raises(self, raw):
        blocks = parse_markdown(raw)
        assert all(isinstance(block, Paragraph) for block in blocks)


class TestBlockModels:
    """Block model invariants and serialization"""

    def test_heading_level_range(self):
        with pytest.raises(ValidationError):
            Heading(level=5, text="x")
        with pytest.raises(ValidationError):
            Heading(level=0, text="x")

    def test_list_items_not_empty(self):
        with pytest.raises(ValidationError):
            UnorderedList(items=[])
        with pytest.raises(ValidationError):
            OrderedList(items=[])

    def test_blocks_are_frozen(self):
        block = Paragraph(text="x")
        with pytest.raises(ValidationError):
            block.text = "y"

    def test_model_dump_includes_html(self):
        assert parse_markdown("# T")[0].model_dump() == {
            "type": "heading",
            "level": 1,
            "text": "T",
            "html": "T",
        }
        assert parse_markdown("- **a**")[0].model_dump() == {
            "type": "unordered_list",
            "items": ["**a**"],
            "items_html": ["<strong>a</strong>"],
        }


class TestSampleRoadmap:
    """A realistic model response"""

    def test_block_sequence(self, sample_roadmap):
        blocks = parse_markdown(sample_roadmap)

        assert [block.type for block in blocks] == [
            "heading",
            "heading",
            "heading",
            "ordered_list",
            "paragraph",
        ]
        # No blank line between the first heading and its list
        assert blocks[0].text.startswith("1) 로드맵 요약\n- ")
        assert blocks[1] == Heading(level=3, text="2) 단계별/기간별 커리큘럼")
        assert blocks[2].level == 4
        assert blocks[3].items == ["환경 설정", "첫 테스트 작성"]
        assert "<strong>작은 서비스</strong>" in blocks[4].html


class TestRenderHtml:
    """HTML rendering of block sequences"""

    def test_one_element_per_block(self):
        blocks = parse_markdown("# T\n\n- a\n- b\n\n1. c\n\nd **e**")
        assert render_html(blocks) == (
            "<h1>T</h1>\n"
            "<ul><li>a</li><li>b</li></ul>\n"
            "<ol><li>c</li></ol>\n"
            "<p>d <strong>e</strong></p>"
        )

    def test_empty(self):
        assert render_html([]) == ""
