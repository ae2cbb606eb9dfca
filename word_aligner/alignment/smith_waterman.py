"""
Word-level Smith-Waterman local alignment

Texts are compared token by token rather than character by character,
which keeps the score matrix small and makes the alignment robust to
minor rewording:
- Builds the (m+1) x (n+1) score matrix and tracks the best cell
- Normalizes the best value against a perfect match of the second text
- Traces back from the best cell to recover the aligned tokens of the first text

Cells are not floored at 0 unless ``clamp_at_zero`` is configured, so
negative running sums can propagate through the matrix.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple
import numpy as np

from .base import AlignerBase, AlignmentPath
from ..core.tokens import TokenHandler
from ..models import (
    AlignedToken,
    AlignmentState,
    EmptyInputError,
    MatrixInvariantError,
)


@dataclass(frozen=True)
class ScoringWeights:
    """Scores of the four cell transitions"""

    match: int = 2
    mismatch: int = -1
    deletion: int = -1  # gap in the second sequence
    insertion: int = -1  # gap in the first sequence

    @staticmethod
    def _weight(name: str, value: Any) -> int:
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"{name} weight must be an integer, got {value}")
        return int(value)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ScoringWeights":
        weights = cls(
            **{
                name: cls._weight(name, config.get(name, getattr(cls, name)))
                for name in ("match", "mismatch", "deletion", "insertion")
            }
        )
        if weights.match <= 0:
            raise ValueError(f"match weight must be positive, got {weights.match}")
        return weights


def verify_boundaries(H: np.ndarray, m: int, n: int) -> None:
    """Check that H is (m+1) x (n+1) with a zero first row and first column.

    Raises:
        MatrixInvariantError: shape or boundary cells are wrong
    """
    if H.shape != (m + 1, n + 1):
        raise MatrixInvariantError(
            f"score matrix has shape {H.shape}, expected {(m + 1, n + 1)}"
        )
    if np.any(H[:, 0] != 0) or np.any(H[0, :] != 0):
        raise MatrixInvariantError("score matrix boundary is not zero-initialized")


class SmithWatermanAligner(AlignerBase):
    """
    Local alignment of two token sequences.

    Configuration parameters:
    - match, mismatch, deletion, insertion: transition weights (2, -1, -1, -1)
    - clamp_at_zero: floor every cell at 0 like textbook Smith-Waterman
    """

    CLAMP_AT_ZERO = False

    def __init__(self, **config):
        super().__init__(**config)
        self.weights = ScoringWeights.from_config(config)
        self.clamp_at_zero = bool(config.get("clamp_at_zero", self.CLAMP_AT_ZERO))

    @staticmethod
    def _compare_key(token: str) -> str:
        return TokenHandler.clean_token(token).casefold()

    def align(self, tokens1: List[str], tokens2: List[str]) -> AlignmentPath:
        """
        Align tokens2 against tokens1.

        The score is not symmetric: it is normalized by the length of
        tokens2 only, and the aligned tokens always come from tokens1.

        Raises:
            EmptyInputError: either sequence is empty
        """
        if not tokens1:
            raise EmptyInputError("text1")
        if not tokens2:
            raise EmptyInputError("text2")

        self.logger.debug(
            f"Aligning {len(tokens1)} x {len(tokens2)} tokens "
            f"(weights={self.weights}, clamp_at_zero={self.clamp_at_zero})"
        )

        H, best_i, best_j = self.build_matrix(tokens1, tokens2)
        best_value = int(H[best_i, best_j])
        score = self.normalized_score(best_value, len(tokens2))
        tokens = self.traceback(H, tokens1, tokens2, best_i, best_j)

        if best_value == 0:
            state = AlignmentState.DEGENERATE
            self.logger.debug("No local alignment found, falling back to first token")
        else:
            state = AlignmentState.ALIGNED

        self.logger.debug(
            f"Best cell ({best_i}, {best_j}) = {best_value}, score={score:.4f}, "
            f"{len(tokens)} aligned tokens"
        )

        return AlignmentPath(
            tokens=tokens,
            best_cell=(best_i, best_j),
            best_value=best_value,
            score=score,
            state=state,
        )

    def build_matrix(
        self, tokens1: List[str], tokens2: List[str]
    ) -> Tuple[np.ndarray, int, int]:
        """
        Fill the score matrix.

        Returns:
            (H, best_i, best_j) where (best_i, best_j) is the first cell in
            row-major order holding the maximum value; (0, 0) if no cell
            exceeds 0
        """
        m, n = len(tokens1), len(tokens2)
        w = self.weights
        keys1 = [self._compare_key(t) for t in tokens1]
        keys2 = [self._compare_key(t) for t in tokens2]

        H = np.empty((m + 1, n + 1), dtype=np.int64)
        H[:, 0] = 0  # i = 0..m
        H[0, :] = 0  # j = 0..n

        best_value = 0
        best_i = best_j = 0

        for i in range(1, m + 1):
            key1 = keys1[i - 1]
            for j in range(1, n + 1):
                diag = int(H[i - 1, j - 1])
                diag += w.match if key1 == keys2[j - 1] else w.mismatch
                up = int(H[i - 1, j]) + w.deletion
                left = int(H[i, j - 1]) + w.insertion

                value = max(diag, up, left)
                if self.clamp_at_zero and value < 0:
                    value = 0
                H[i, j] = value

                if value > best_value:
                    best_value = value
                    best_i, best_j = i, j

        verify_boundaries(H, m, n)
        return H, best_i, best_j

    def normalized_score(self, best_value: int, n: int) -> float:
        """Best value relative to a perfect match of all n tokens of the second text"""
        if n <= 0:
            raise EmptyInputError("text2")
        return best_value / (n * self.weights.match)

    def traceback(
        self,
        H: np.ndarray,
        tokens1: List[str],
        tokens2: List[str],
        best_i: int,
        best_j: int,
    ) -> List[AlignedToken]:
        """
        Walk back from the best cell and collect aligned tokens of tokens1.

        Walking stops at the first row or column; direction preference is
        up, then left, then diagonal, with ties going to the diagonal. The
        cell the walk ends on is always recorded, so the result is never
        empty.
        """
        value = int(H[best_i, best_j])
        i, j = max(best_i - 1, 0), max(best_j - 1, 0)
        path = []

        while value != 0 and i != 0 and j != 0:
            if TokenHandler.clean_token(tokens2[j]) != "":
                path.append(self._aligned_token(tokens1, tokens2, i, j))

            up = H[i - 1, j]
            left = H[i, j - 1]
            diag = H[i - 1, j - 1]

            if up > left:
                if up > diag:
                    i -= 1
                else:
                    i -= 1
                    j -= 1
            else:
                if left > diag:
                    j -= 1
                else:
                    i -= 1
                    j -= 1

        # Leftmost aligned token
        path.append(self._aligned_token(tokens1, tokens2, i, j))
        path.reverse()
        return path

    @staticmethod
    def _aligned_token(
        tokens1: List[str], tokens2: List[str], i: int, j: int
    ) -> AlignedToken:
        return AlignedToken(
            position=i,
            matched=TokenHandler.tokens_equal(tokens1[i], tokens2[j]),
            token=tokens1[i],
        )
