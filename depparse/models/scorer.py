"""
Arc scoring shared by every parser

score(head_pos, dep_pos, distance) = affinity(head_pos, dep_pos) * exp(-distance / decay_length)

The affinity table is an explicit value handed to the scorer, so parsers built
from different tables never share state.
"""

import math
from typing import Dict, Mapping, Optional, Sequence, Any

import numpy as np

from depparse.data.structures import Token, ROOT
from depparse.utils.constants import config

DEFAULT_AFFINITY = 0.5
DEFAULT_DECAY_LENGTH = 5.0


class ScoreTable:
    """Read-only (head category, dependent category) -> affinity in [0, 1]."""

    def __init__(self, affinities: Optional[Mapping[str, Mapping[str, float]]] = None,
                 default: float = DEFAULT_AFFINITY):
        self._check(default, "default affinity")
        table: Dict[str, Dict[str, float]] = {}
        for head_pos, row in (affinities or {}).items():
            table[str(head_pos)] = {}
            for dep_pos, value in row.items():
                self._check(value, f"affinity {head_pos}->{dep_pos}")
                table[str(head_pos)][str(dep_pos)] = float(value)
        self._table = table
        self.default = float(default)

    @staticmethod
    def _check(value: Any, what: str):
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0.0 <= value <= 1.0:
            raise ValueError(f"{what} must be a number in [0, 1], got {value!r}")

    @classmethod
    def from_config(cls, cfg: Optional[Mapping[str, Any]] = None) -> 'ScoreTable':
        scoring = (cfg if cfg is not None else config).get('scoring', {})
        return cls(
            affinities=scoring.get('affinities') or {},
            default=scoring.get('default_affinity', DEFAULT_AFFINITY),
        )

    def affinity(self, head_pos: str, dep_pos: str) -> float:
        return self._table.get(head_pos, {}).get(dep_pos, self.default)

    def __contains__(self, pair) -> bool:
        head_pos, dep_pos = pair
        return dep_pos in self._table.get(head_pos, {})

    def __repr__(self):
        n_pairs = sum(len(row) for row in self._table.values())
        return f"{self.__class__.__name__}(n_pairs={n_pairs}, default={self.default})"


class ArcScorer:
    """Scores candidate head -> dependent arcs from POS categories and distance."""

    def __init__(self, table: Optional[ScoreTable] = None, decay_length: float = DEFAULT_DECAY_LENGTH):
        if decay_length <= 0:
            raise ValueError(f"decay_length must be positive, got {decay_length}")
        self.table = table if table is not None else ScoreTable()
        self.decay_length = float(decay_length)

    @classmethod
    def from_config(cls, cfg: Optional[Mapping[str, Any]] = None) -> 'ArcScorer':
        cfg = cfg if cfg is not None else config
        scoring = cfg.get('scoring', {})
        return cls(
            table=ScoreTable.from_config(cfg),
            decay_length=scoring.get('decay_length', DEFAULT_DECAY_LENGTH),
        )

    def score(self, head_pos: str, dep_pos: str, distance: int) -> float:
        return self.table.affinity(head_pos, dep_pos) * math.exp(-abs(distance) / self.decay_length)

    def score_tokens(self, head: Token, dep: Token) -> float:
        return self.score(head.pos, dep.pos, abs(head.index - dep.index))

    def score_matrix(self, tokens: Sequence[Token], allow_root_dependent: bool = True) -> np.ndarray:
        """
        Build scores[i][j] for the arc i -> j over ROOT + tokens.

        The diagonal is -inf. With ``allow_root_dependent=False`` the ROOT
        column (arcs into ROOT) is -inf as well.
        """
        words = [ROOT] + list(tokens)
        size = len(words)
        scores = np.full((size, size), -np.inf)

        for i in range(size):
            for j in range(size):
                if i == j:
                    continue
                if j == 0 and not allow_root_dependent:
                    continue
                scores[i][j] = self.score_tokens(words[i], words[j])

        return scores
