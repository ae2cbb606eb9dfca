"""Alignment result models

Result container, alignment states and the exception hierarchy shared by
the aligner, the formatter and the API layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple
from enum import Enum


@dataclass(frozen=True)
class AlignedToken:
    """One token of the first text on the alignment path"""

    position: int
    matched: bool
    token: str

    def to_dict(self) -> Dict[str, Any]:
        return {"position": self.position, "matched": self.matched, "token": self.token}


class AlignmentState(Enum):
    """Outcome of a local alignment"""

    ALIGNED = "aligned"
    DEGENERATE = "degenerate"  # best cell value is 0, no useful local alignment


class AlignmentError(Exception):
    """Base class for alignment failures."""


class EmptyInputError(AlignmentError):
    """Raised when one of the input texts contains no tokens.

    The score denominator depends on the token count of the second text,
    so alignment is refused before any matrix is built.
    """

    def __init__(self, which: str):
        self.which = which
        super().__init__(f"{which} contains no tokens")


class MatrixInvariantError(AlignmentError):
    """Raised when a score matrix is mis-shaped or has non-zero boundaries."""


@dataclass(frozen=True)
class AlignmentResult:
    """Result of aligning two texts

    ``score`` is the best local alignment value divided by the best value
    the second text could reach on its own, ``snippet`` the highlighted
    excerpt of the first text.
    """

    score: float
    snippet: str
    alignment: List[AlignedToken] = field(default_factory=list)
    state: AlignmentState = AlignmentState.ALIGNED
    best_cell: Tuple[int, int] = (0, 0)
    best_value: int = 0

    def __repr__(self):
        return (
            f"AlignmentResult(score={self.score:.4f}, state={self.state.value}, "
            f"tokens={len(self.alignment)})"
        )

    @property
    def is_degenerate(self) -> bool:
        return self.state is AlignmentState.DEGENERATE

    @property
    def matched_tokens(self) -> List[str]:
        """Original tokens of the first text that matched"""
        return [a.token for a in self.alignment if a.matched]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "score": self.score,
            "snippet": self.snippet,
            "state": self.state.value,
            "best_cell": list(self.best_cell),
            "best_value": self.best_value,
            "alignment": [a.to_dict() for a in self.alignment],
        }
