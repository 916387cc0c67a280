"""
Markdown block parsing for LLM-generated roadmaps.
Converts a constrained Markdown subset into typed content blocks.

Supported:
- Headings "# " through "#### "
- Unordered lists ("- " or "* ") and ordered lists ("1. ")
- Paragraphs, with **bold** and `code` inline spans

Blocks are separated by one or more blank lines. A heading is recognised
only at the start of a block and swallows the rest of that block.
"""

import logging
import re
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from learning_roadmap.utils.inline_format import escape_text, format_inline

logger = logging.getLogger(__name__)

SEGMENT_SEPARATOR = re.compile(r"\n\n+")
HEADING_MARKERS = (("# ", 1), ("## ", 2), ("### ", 3), ("#### ", 4))
BULLET_MARKER = re.compile(r"^[-*]\s+")
ORDERED_LIST_START = re.compile(r"^[0-9]+\.\s")
ORDERED_MARKER = re.compile(r"^[0-9]+\.\s+")


class _Block(BaseModel):
    model_config = ConfigDict(frozen=True)


class Heading(_Block):
    type: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=4)
    text: str

    @computed_field
    @property
    def html(self) -> str:
        # Headings are plain text; inline spans are not resolved
        return escape_text(self.text)


class UnorderedList(_Block):
    type: Literal["unordered_list"] = "unordered_list"
    items: list[str] = Field(..., min_length=1)

    @computed_field
    @property
    def items_html(self) -> list[str]:
        return [format_inline(item) for item in self.items]


class OrderedList(_Block):
    type: Literal["ordered_list"] = "ordered_list"
    items: list[str] = Field(..., min_length=1)

    @computed_field
    @property
    def items_html(self) -> list[str]:
        return [format_inline(item) for item in self.items]


class Paragraph(_Block):
    type: Literal["paragraph"] = "paragraph"
    text: str

    @computed_field
    @property
    def html(self) -> str:
        return format_inline(self.text)


ContentBlock = Annotated[
    Union[Heading, UnorderedList, OrderedList, Paragraph],
    Field(discriminator="type"),
]


def _strip_markers(segment: str, marker: re.Pattern) -> list[str]:
    return [marker.sub("", line, count=1) for line in segment.split("\n")]


def parse_block(segment: str) -> ContentBlock | None:
    """
    Classify a single blank-line-delimited segment.

    Args:
        segment: Raw segment text

    Returns:
        The content block, or None if the segment is empty after trimming
    """
    trimmed = segment.strip()
    if not trimmed:
        return None

    for marker, level in HEADING_MARKERS:
        if trimmed.startswith(marker):
            return Heading(level=level, text=trimmed[len(marker) :])

    if trimmed.startswith("- ") or trimmed.startswith("* "):
        return UnorderedList(items=_strip_markers(trimmed, BULLET_MARKER))

    if ORDERED_LIST_START.match(trimmed):
        return OrderedList(items=_strip_markers(trimmed, ORDERED_MARKER))

    return Paragraph(text=trimmed)


def parse_markdown(raw: str) -> list[ContentBlock]:
    """
    Parse Markdown text into an ordered list of content blocks.

    Never raises: anything that is not a heading or a list becomes a
    paragraph.

    Args:
        raw: Markdown text (e.g. a model response)

    Returns:
        Content blocks in source order
    """
    if not raw or not raw.strip():
        return []

    blocks = []
    for segment in SEGMENT_SEPARATOR.split(raw):
        block = parse_block(segment)
        if block is not None:
            blocks.append(block)

    logger.debug(f"📝 Parsed {len(blocks)} content block(s) from {len(raw)} chars")
    return blocks


def render_html(blocks: list[ContentBlock]) -> str:
    """Render content blocks to an HTML fragment, one element per block."""
    parts = []
    for block in blocks:
        if isinstance(block, Heading):
            parts.append(f"<h{block.level}>{block.html}</h{block.level}>")
        elif isinstance(block, (UnorderedList, OrderedList)):
            tag = "ul" if isinstance(block, UnorderedList) else "ol"
            items = "".join(f"<li>{item}</li>" for item in block.items_html)
            parts.append(f"<{tag}>{items}</{tag}>")
        else:
            parts.append(f"<p>{block.html}</p>")
    return "\n".join(parts)
