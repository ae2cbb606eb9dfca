"""
Word Aligner: word-level local alignment and highlighted excerpts of two texts.
"""

import logging

from .api import align, calculate_similarity, SmithWaterman
from .models import (
    AlignedToken,
    AlignmentResult,
    AlignmentState,
    AlignmentError,
    EmptyInputError,
    MatrixInvariantError,
)
from . import core
from .core import TokenHandler, tokenize_string, clean_token

# Alignment module
from .alignment import (
    AlignerBase,
    AlignmentPath,
    SmithWatermanAligner,
    ScoringWeights,
)

# Output module
from .output import SnippetFormatter

__version__ = "0.1.0"
__all__ = [
    "align",
    "calculate_similarity",
    "SmithWaterman",
    "AlignedToken",
    "AlignmentResult",
    "AlignmentState",
    "AlignmentError",
    "EmptyInputError",
    "MatrixInvariantError",
    "TokenHandler",
    "tokenize_string",
    "clean_token",
    "AlignerBase",
    "AlignmentPath",
    "SmithWatermanAligner",
    "ScoringWeights",
    "SnippetFormatter",
    "core",
]

# Configure default logging format to be minimal
_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(message)s"))
_logger = logging.getLogger("word_aligner")
_logger.addHandler(_handler)
_logger.setLevel(logging.INFO)
