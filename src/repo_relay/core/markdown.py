"""Model card cleanup: turn a raw README into a short plain-text excerpt."""

import re
from typing import Optional

MAX_SUMMARY_CHARS = 1021
ELLIPSIS = "..."

_FRONTMATTER_RE = re.compile(r"\A---\s*[\s\S]*?\n---\s*\n?")

# Dropped together with everything inside them.
BLOCK_TAGS = (
    "details", "summary", "div",
    "table", "thead", "tbody", "tr", "td", "th",
    "style", "script", "footer", "header", "nav",
    "section", "aside", "figure", "figcaption",
)
_BLOCK_RE = re.compile(
    r"<\s*(" + "|".join(BLOCK_TAGS) + r")\b[\s\S]*?</\s*\1\s*>",
    re.IGNORECASE,
)

VOID_TAGS = ("img", "br", "hr", "input", "meta", "link")
_VOID_RE = re.compile(r"<\s*(?:" + "|".join(VOID_TAGS) + r")\b[^>]*>", re.IGNORECASE)

_ANY_TAG_RE = re.compile(r"</?[^>]+>")

_ATX_HEADING_RE = re.compile(r"^\s{0,3}#{1,6}\s+.*$", re.MULTILINE)
_SETEXT_UNDERLINE_RE = re.compile(r"^\s*[-=]{3,}\s*$", re.MULTILINE)
_IMAGE_RE = re.compile(r"!\[[^\]]*\]\([^)]*\)")
_TABLE_ROW_RE = re.compile(r"^\s*\|.*\|\s*$", re.MULTILINE)

_HEX_ENTITY_RE = re.compile(r"&#x([0-9a-fA-F]+);")
_DEC_ENTITY_RE = re.compile(r"&#(\d+);")

_TRAILING_SPACE_RE = re.compile(r"[ \t]+\n")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def _code_point(match: re.Match, base: int) -> str:
    value = int(match.group(1), base)
    if value > 0x10FFFF:
        return match.group(0)
    return chr(value)


def _strip_html(text: str) -> str:
    text = _BLOCK_RE.sub("", text)
    text = _VOID_RE.sub("", text)
    return _ANY_TAG_RE.sub("", text)


def _strip_markdown(text: str) -> str:
    text = _ATX_HEADING_RE.sub("", text)
    text = _SETEXT_UNDERLINE_RE.sub("", text)
    text = _IMAGE_RE.sub("", text)
    return _TABLE_ROW_RE.sub("", text)


def _decode_entities(text: str) -> str:
    text = (
        text.replace("&nbsp;", " ")
        .replace("&amp;", "&")
        .replace("&lt;", "<")
        .replace("&gt;", ">")
    )
    text = _HEX_ENTITY_RE.sub(lambda m: _code_point(m, 16), text)
    text = _DEC_ENTITY_RE.sub(lambda m: _code_point(m, 10), text)
    # Entities may spell one character as two surrogate halves: join valid
    # pairs, replace stray halves with U+FFFD.
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")


def summarize(raw_text: Optional[str]) -> str:
    """Reduce a README to a bounded plain-text description.

    Steps run in a fixed order, each on the output of the previous one:
    frontmatter, HTML blocks, void and remaining tags, headings, images,
    pipe tables, entities, whitespace. The result is cut to
    MAX_SUMMARY_CHARS and always ends with ELLIPSIS, even when nothing
    was cut.

    Args:
        raw_text: README contents, or None when the repository has none

    Returns:
        At most MAX_SUMMARY_CHARS + len(ELLIPSIS) characters
    """
    text = raw_text or ""

    text = text.removeprefix("\ufeff")
    text = _FRONTMATTER_RE.sub("", text, count=1)

    text = _strip_html(text)
    text = _strip_markdown(text)
    text = _decode_entities(text)

    text = _TRAILING_SPACE_RE.sub("\n", text)
    text = _BLANK_RUN_RE.sub("\n\n", text)
    text = text.strip()

    return text[:MAX_SUMMARY_CHARS] + ELLIPSIS
