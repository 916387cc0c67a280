"""
Inline formatting utilities for model output.
Turns **bold** and `code` spans into HTML markup.

Each span type is resolved by its own left-to-right scanner. The bold pass
runs first and the code pass runs over its output, so a code span inside a
bold span is still converted. Spans never cross a line break and there is no
way to escape a delimiter.
"""

import html

BOLD_DELIMITER = "**"
CODE_DELIMITER = "`"


def escape_text(text: str) -> str:
    """Escape HTML special characters so model output cannot inject markup."""
    return html.escape(text or "")


def replace_delimited(text: str, delimiter: str, tag: str) -> str:
    """
    Wrap every delimiter-enclosed run in ``<tag>...</tag>``.

    The closing delimiter is the nearest one after the opening delimiter
    (shortest match) and must be on the same line. An unmatched delimiter
    character is copied through and scanning resumes at the next character.

    Args:
        text: Text to scan
        delimiter: Opening and closing delimiter (e.g. "**")
        tag: HTML tag name used for matched spans

    Returns:
        Text with matched spans replaced by markup
    """
    width = len(delimiter)
    result = []
    i = 0

    while i < len(text):
        if text.startswith(delimiter, i):
            close = text.find(delimiter, i + width)
            if close == -1:
                # No later opening can be closed either
                result.append(text[i:])
                break
            inner = text[i + width : close]
            if "\n" not in inner:
                result.append(f"<{tag}>{inner}</{tag}>")
                i = close + width
                continue
        result.append(text[i])
        i += 1

    return "".join(result)


def format_bold(text: str) -> str:
    return replace_delimited(text, BOLD_DELIMITER, "strong")


def format_code(text: str) -> str:
    return replace_delimited(text, CODE_DELIMITER, "code")


def format_inline(text: str, escape: bool = True) -> str:
    """
    Resolve inline formatting in a block of text.

    Args:
        text: Raw block text (paragraph or list item)
        escape: HTML-escape the text before substitution. Only disable this
            for fully trusted input.

    Returns:
        Rendering-ready HTML string
    """
    if not text:
        return ""

    if escape:
        text = escape_text(text)

    return format_code(format_bold(text))
