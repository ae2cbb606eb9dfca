"""Snippet formatting for alignment results"""

from typing import List, Tuple
import html
import re

from ..models import AlignedToken


class SnippetFormatter:
    """Renders an alignment path as a highlighted excerpt of the first text

    Styles:
    - ``html``: matched tokens in a black bold span, unmatched tokens in a
      grey bold span, both on a yellow background; tokens are HTML-escaped
    - ``text``: matched tokens as ``[+token+]``, unmatched as ``[-token-]``;
      backslashes, ``[`` and ``]`` inside tokens are escaped with a backslash

    Both styles mark cut-off context with ``...``.
    """

    STYLES = {"html", "text"}
    DEFAULT_STYLE = "html"
    CONTEXT_SIZE = 10
    TRUNCATION_MARKER = "..."

    MATCHED_SPAN = '<span style="color:black;font-weight:bold;background-color:yellow;">'
    UNMATCHED_SPAN = (
        '<span style="color:rgb(128,128,128);font-weight:bold;background-color:yellow;">'
    )
    HTML_PATTERN = re.compile(
        r'<span style="color:(black|rgb\(128,128,128\));'
        r'font-weight:bold;background-color:yellow;">(.*?)</span>'
    )
    # Escape pairs are consumed on their own so a match never starts inside one
    TEXT_PATTERN = re.compile(r"\\.|\[([+-])((?:\\.|[^\\\[\]])*?)\1\]")
    TEXT_SPECIALS = re.compile(r"([\\\[\]])")
    TEXT_ESCAPE = re.compile(r"\\(.)")

    def __init__(self, style: str = DEFAULT_STYLE, context_size: int = CONTEXT_SIZE):
        if style not in self.STYLES:
            raise ValueError(
                f"Unknown snippet style {style!r}, expected one of {sorted(self.STYLES)}"
            )
        if context_size < 0:
            raise ValueError(f"context_size must be >= 0, got {context_size}")
        self.style = style
        self.context_size = context_size

    def highlight(self, token: str, matched: bool) -> str:
        """Wrap a single token in the matched or unmatched highlight"""
        if self.style == "html":
            span = self.MATCHED_SPAN if matched else self.UNMATCHED_SPAN
            return f"{span}{html.escape(token)}</span>"
        sign = "+" if matched else "-"
        return f"[{sign}{self._plain(token)}{sign}]"

    def _plain(self, token: str) -> str:
        if self.style == "html":
            return html.escape(token)
        return self.TEXT_SPECIALS.sub(r"\\\1", token)

    def render_span(self, alignment: List[AlignedToken]) -> List[str]:
        """Highlighted tokens, keeping only the first entry per position"""
        parts = []
        last_pos = -1
        for a in alignment:
            if a.position != last_pos:
                parts.append(self.highlight(a.token, a.matched))
            last_pos = a.position
        return parts

    def render_prefix(self, tokens: List[str], first_pos: int) -> List[str]:
        """Up to context_size tokens before first_pos"""
        start = max(0, first_pos - self.context_size)
        parts = [self._plain(t) for t in tokens[start:first_pos]]
        if start > 0:
            parts.insert(0, self.TRUNCATION_MARKER)
        return parts

    def render_suffix(self, tokens: List[str], last_pos: int) -> List[str]:
        """Up to context_size tokens after last_pos"""
        end = min(len(tokens), last_pos + 1 + self.context_size)
        parts = [self._plain(t) for t in tokens[last_pos + 1 : end]]
        if end < len(tokens):
            parts.append(self.TRUNCATION_MARKER)
        return parts

    def format(self, tokens: List[str], alignment: List[AlignedToken]) -> str:
        """
        Build the snippet: prefix context, highlighted span, suffix context.

        Args:
            tokens: all tokens of the first text
            alignment: aligned tokens in increasing position order

        Returns:
            the parts joined by single spaces
        """
        if not alignment:
            return ""

        parts = self.render_prefix(tokens, alignment[0].position)
        parts.extend(self.render_span(alignment))
        parts.extend(self.render_suffix(tokens, alignment[-1].position))
        return " ".join(parts)

    def highlighted(self, snippet: str) -> List[Tuple[str, bool]]:
        """
        Extract the highlighted tokens from a snippet of this formatter's style.

        Returns:
            (token, matched) pairs in snippet order
        """
        if self.style == "html":
            return [
                (html.unescape(token), color == "black")
                for color, token in self.HTML_PATTERN.findall(snippet)
            ]
        return [
            (self.TEXT_ESCAPE.sub(r"\1", m.group(2)), m.group(1) == "+")
            for m in self.TEXT_PATTERN.finditer(snippet)
            if m.group(1)
        ]
