"""Snippet rendering tests"""

import pytest

from word_aligner.models import AlignedToken
from word_aligner.output import SnippetFormatter


def _aligned(*positions, tokens):
    return [AlignedToken(p, True, tokens[p]) for p in positions]


def test_text_style_delimiters(text_formatter):
    tokens = ["a", "b", "c"]
    alignment = [AlignedToken(0, True, "a"), AlignedToken(1, False, "b")]

    assert text_formatter.format(tokens, alignment) == "[+a+] [-b-] c"


def test_duplicate_positions_render_once(text_formatter):
    tokens = ["w", "x", "y"]
    alignment = [
        AlignedToken(0, True, "w"),
        AlignedToken(1, True, "x"),
        AlignedToken(1, False, "x"),
        AlignedToken(2, True, "y"),
    ]

    assert text_formatter.format(tokens, alignment) == "[+w+] [+x+] [+y+]"


def test_context_is_truncated_on_both_sides(text_formatter, long_tokens):
    snippet = text_formatter.format(long_tokens, _aligned(15, tokens=long_tokens))

    expected = (
        ["..."]
        + long_tokens[5:15]
        + ["[+t15+]"]
        + long_tokens[16:26]
        + ["..."]
    )
    assert snippet == " ".join(expected)


def test_full_context_window_is_not_marked_truncated(text_formatter, long_tokens):
    tokens = long_tokens[:21]
    snippet = text_formatter.format(tokens, _aligned(10, tokens=tokens))

    assert snippet == " ".join(tokens[:10] + ["[+t10+]"] + tokens[11:21])
    assert "..." not in snippet


def test_span_at_text_edges_has_no_context(text_formatter):
    tokens = ["only"]
    assert text_formatter.format(tokens, _aligned(0, tokens=tokens)) == "[+only+]"


def test_custom_context_size(long_tokens):
    formatter = SnippetFormatter(style="text", context_size=2)
    snippet = formatter.format(long_tokens, _aligned(3, 4, tokens=long_tokens))

    assert snippet == "... t1 t2 [+t3+] [+t4+] t5 t6 ..."


def test_zero_context_size(long_tokens):
    formatter = SnippetFormatter(style="text", context_size=0)
    snippet = formatter.format(long_tokens, _aligned(3, tokens=long_tokens))

    assert snippet == "... [+t3+] ..."


def test_empty_alignment_renders_nothing(text_formatter):
    assert text_formatter.format(["a"], []) == ""


def test_html_style_spans(html_formatter):
    tokens = ["a", "b", "c"]
    alignment = [AlignedToken(0, True, "a"), AlignedToken(1, False, "b")]
    snippet = html_formatter.format(tokens, alignment)

    assert snippet == (
        '<span style="color:black;font-weight:bold;background-color:yellow;">a</span> '
        '<span style="color:rgb(128,128,128);font-weight:bold;background-color:yellow;">b</span> '
        "c"
    )


def test_html_style_escapes_tokens(html_formatter):
    tokens = ["<b>", "&", "tail"]
    snippet = html_formatter.format(tokens, [AlignedToken(0, True, "<b>")])

    assert "<b>" not in snippet.replace("<span", "").replace("</span>", "")
    assert "&lt;b&gt;" in snippet
    assert snippet.endswith("&amp; tail")


@pytest.mark.parametrize("style", ["html", "text"])
def test_highlighted_locates_highlighted_tokens(style):
    formatter = SnippetFormatter(style=style)
    tokens = ["x", "<dog.>", "[cat]", "y"]
    alignment = [AlignedToken(1, True, "<dog.>"), AlignedToken(2, False, "[cat]")]

    snippet = formatter.format(tokens, alignment)
    assert formatter.highlighted(snippet) == [("<dog.>", True), ("[cat]", False)]


def test_text_style_escapes_delimiters(text_formatter):
    tokens = ["[+x+]", "a+]b", "c\\d", "[-y-]"]
    alignment = [AlignedToken(1, True, "a+]b"), AlignedToken(2, False, "c\\d")]

    snippet = text_formatter.format(tokens, alignment)
    assert snippet == "\\[+x+\\] [+a+\\]b+] [-c\\\\d-] \\[-y-\\]"
    assert text_formatter.highlighted(snippet) == [("a+]b", True), ("c\\d", False)]


def test_text_style_context_is_never_reported_as_highlighted(text_formatter):
    tokens = ["[+x+]", "cat", "sat"]
    alignment = [AlignedToken(1, True, "cat"), AlignedToken(2, True, "sat")]

    snippet = text_formatter.format(tokens, alignment)
    assert text_formatter.highlighted(snippet) == [("cat", True), ("sat", True)]


def test_invalid_style_is_rejected():
    with pytest.raises(ValueError):
        SnippetFormatter(style="markdown")


def test_negative_context_size_is_rejected():
    with pytest.raises(ValueError):
        SnippetFormatter(context_size=-1)
