"""Base aligner interface

Defines the common interface for token-sequence aligners.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple
from dataclasses import dataclass, field
import logging

from ..models import AlignedToken, AlignmentState


@dataclass
class AlignmentPath:
    """Alignment path data structure

    Aligned tokens of the first sequence in increasing position order,
    together with the matrix cell the path was traced back from.
    """

    tokens: List[AlignedToken] = field(default_factory=list)
    best_cell: Tuple[int, int] = (0, 0)
    best_value: int = 0
    score: float = 0.0
    state: AlignmentState = AlignmentState.ALIGNED

    def __repr__(self):
        return (
            f"AlignmentPath(cell={self.best_cell}, value={self.best_value}, "
            f"score={self.score:.3f}, tokens={len(self.tokens)})"
        )

    def __len__(self) -> int:
        return len(self.tokens)

    @property
    def first_position(self) -> int:
        return self.tokens[0].position

    @property
    def last_position(self) -> int:
        return self.tokens[-1].position


class AlignerBase(ABC):
    """Aligner base class

    All alignment algorithms should inherit from this class and implement the align() method.

    Responsibilities:
    - Define unified alignment interface
    - Hold configuration
    - Handle logging
    """

    def __init__(self, **config):
        """Initialize aligner

        Args:
            **config: Algorithm-related configuration parameters
        """
        self.config = config
        self.logger = logging.getLogger(self.__class__.__module__)

    @abstractmethod
    def align(self, tokens1: List[str], tokens2: List[str]) -> AlignmentPath:
        """Perform alignment

        Args:
            tokens1: tokens of the text the excerpt is taken from
            tokens2: tokens of the text that is searched for

        Returns:
            AlignmentPath with at least one aligned token

        Raises:
            ValueError: Invalid input parameters
        """
        raise NotImplementedError
