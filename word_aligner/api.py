"""
API module for word-level text alignment.
Provides high-level interface for easy integration.
"""

from typing import List

from .alignment import SmithWatermanAligner
from .core.tokens import tokenize_string
from .models import AlignmentResult
from .output import SnippetFormatter


def _split_config(config):
    """Separate formatter options from aligner options"""
    aligner_config = dict(config)
    style = aligner_config.pop("style", SnippetFormatter.DEFAULT_STYLE)
    context_size = aligner_config.pop("context_size", SnippetFormatter.CONTEXT_SIZE)
    return aligner_config, SnippetFormatter(style=style, context_size=context_size)


def align(text1: str, text2: str, **config) -> AlignmentResult:
    """
    Locally align text2 against text1 and highlight the match inside text1.

    Args:
        text1: text the snippet is taken from
        text2: text searched for; its token count is the score denominator
        **config: aligner weights (match, mismatch, deletion, insertion),
            clamp_at_zero, and formatter options style and context_size

    Returns:
        AlignmentResult with score and snippet

    Raises:
        EmptyInputError: either text contains no tokens
        ValueError: invalid configuration
    """
    aligner_config, formatter = _split_config(config)
    aligner = SmithWatermanAligner(**aligner_config)

    tokens1 = tokenize_string(text1)
    tokens2 = tokenize_string(text2)
    path = aligner.align(tokens1, tokens2)

    return AlignmentResult(
        score=path.score,
        snippet=formatter.format(tokens1, path.tokens),
        alignment=list(path.tokens),
        state=path.state,
        best_cell=path.best_cell,
        best_value=path.best_value,
    )


def calculate_similarity(text1: str, text2: str, **config) -> float:
    """Convenience helper returning only the alignment score."""
    return align(text1, text2, **config).score


class SmithWaterman:
    """Aligns two strings on construction and exposes score and snippet.

    Example:
        >>> sw = SmithWaterman(
        ...     "Smith-Waterman and Systolic PE Array are well-known dynamic programming algorithms.",
        ...     "Smith-Waterman algorithm is a well-known algorithm for performing sequence alignment.",
        ... )
        >>> f"{sw.get_score():.4f}"
        '0.1000'
    """

    def __init__(self, str1: str, str2: str, **config):
        self._result = align(str1, str2, **config)

    @property
    def result(self) -> AlignmentResult:
        return self._result

    def get_score(self) -> float:
        return self._result.score

    def get_html(self) -> str:
        return self._result.snippet

    def matched_tokens(self) -> List[str]:
        return self._result.matched_tokens
