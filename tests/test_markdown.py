"""Tests for README summarization."""

from repo_relay.core.markdown import ELLIPSIS, MAX_SUMMARY_CHARS, summarize


def test_clean_text_kept_with_ellipsis():
    """Plain text passes through, trimmed, with the fixed suffix."""
    text = "A compact model for tests.\nIt does very little."
    assert summarize(f"  {text}\n") == text + "..."


def test_missing_readme():
    """None and empty input both give just the suffix."""
    assert summarize(None) == "..."
    assert summarize("") == "..."


def test_frontmatter_removed():
    result = summarize("---\ntitle: x\n---\nBody text")
    assert "Body text" in result
    assert "title: x" not in result


def test_bom_and_frontmatter_removed():
    raw = "\ufeff---\nlicense: mit\ntags:\n- text-generation\n---\n\n# Small model\n\nBody"
    assert summarize(raw) == "Body..."


def test_table_block_removed():
    """HTML tables vanish with their content; surrounding text stays."""
    raw = "Intro text\n<table>\n<tr><td>cell</td><td>value</td></tr>\n</table>\nOutro text"
    result = summarize(raw)
    assert "cell" not in result
    assert "value" not in result
    assert result == "Intro text\n\nOutro text..."


def test_details_block_removed():
    raw = "<details><summary>Click to expand</summary>Hidden</details>Shown"
    assert summarize(raw) == "Shown..."


def test_block_tags_case_insensitive():
    assert summarize("<DIV align='center'>logo</div>Text") == "Text..."


def test_void_and_inline_tags():
    """Void tags disappear; other tags are stripped but keep their text."""
    raw = 'A<br>B <b>bold</b> <img src="x.png"> <a href="https://x.y">link</a>'
    assert summarize(raw) == "AB bold  link..."


def test_headings_removed():
    raw = "# Title\n## Usage\nBody\nTagline\n========\nMore"
    result = summarize(raw)
    assert "Title" not in result
    assert "Usage" not in result
    assert "=" not in result
    assert "Body" in result
    assert "More" in result


def test_images_removed_without_alt_text():
    result = summarize("See ![company logo](https://x.y/logo.png) here")
    assert "logo" not in result
    assert "https" not in result
    assert result.startswith("See")


def test_markdown_table_rows_removed():
    raw = "| Metric | Score |\n|---|---|\n| MMLU | 70.1 |\nAfter table"
    assert summarize(raw) == "After table..."


def test_entities_decoded():
    raw = "Fish &amp; chips&nbsp;&lt;3 &gt; &#x1F917; &#65;"
    assert summarize(raw) == "Fish & chips <3 > \U0001F917 A..."


def test_surrogate_pair_entities_joined():
    """Two entity halves of one emoji decode to the emoji itself."""
    assert summarize("Hi &#55357;&#56832;") == "Hi \U0001F600..."
    assert summarize("&#xD83D;&#xDE00; there") == "\U0001F600 there..."


def test_lone_surrogate_entity_replaced():
    result = summarize("bad &#xD800; half")

    assert result == "bad \ufffd half..."
    result.encode("utf-8")


def test_out_of_range_entity_left_alone():
    assert summarize("&#x110000;") == "&#x110000;..."


def test_whitespace_normalized():
    raw = "first  \t\n\n\n\n\nsecond   \nthird"
    assert summarize(raw) == "first\n\nsecond\nthird..."


def test_long_text_truncated():
    """Long input is cut to exactly MAX_SUMMARY_CHARS plus the suffix."""
    result = summarize("a" * 5000)
    assert len(result) == MAX_SUMMARY_CHARS + len(ELLIPSIS) == 1024
    assert result.endswith("...")


def test_boundary_length():
    assert len(summarize("b" * 1021)) == 1024
    assert summarize("b" * 1020) == "b" * 1020 + "..."


def test_full_model_card():
    raw = """---
license: apache-2.0
library_name: transformers
---

<div align="center">
  <img src="banner.png" width="60%">
</div>

# Small Model

![eval](assets/eval.png)

Small Model is a 7B parameter language model.

## Benchmarks

| Task | Score |
|------|-------|
| ARC  | 61.2  |

<details>
<summary>Citation</summary>

@misc{small2025}
</details>

Released under Apache&nbsp;2.0.
"""
    result = summarize(raw)
    assert result == (
        "Small Model is a 7B parameter language model.\n\n"
        "Released under Apache 2.0...."
    )
