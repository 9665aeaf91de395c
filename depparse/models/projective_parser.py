"""
Projective parsers

- GreedyProjectiveParser: dependents are attached left to right, each to its
  best-scoring head among the candidates that keep the tree projective and
  acyclic. Fast, order dependent, not globally optimal.
- EisnerParser: Eisner's O(n³) span-based dynamic program, globally optimal
  among projective trees.

Reference:
    - Eisner (1996): Three New Probabilistic Models for Dependency Parsing
"""

from typing import List, Sequence

import numpy as np

from depparse.data.structures import Token, Arc
from depparse.evaluation.metrics import arcs_cross
from depparse.models.base_parser import BaseParser
from depparse.utils.logs import logger


class GreedyProjectiveParser(BaseParser):
    """Greedy left-to-right head selection under a no-crossing constraint."""

    name = "eisner"

    def decode(self, tokens: Sequence[Token]) -> List[Arc]:
        n = len(tokens)
        scores = self.scorer.score_matrix(tokens)
        parent = [-1] * (n + 1)

        for j in range(1, n + 1):
            best_score = -np.inf
            best_head = None

            for i in range(n + 1):
                if i == j:
                    continue
                if self._is_descendant(parent, i, j):
                    continue
                if self._crosses_fixed_arc(parent, i, j):
                    continue
                if scores[i][j] > best_score:
                    best_score = scores[i][j]
                    best_head = i

            if best_head is None:
                logger.debug(f"No projective head for token {j}, attaching to ROOT")
                best_head = 0
            parent[j] = best_head

        return self._arcs_from_heads(parent, scores)

    @staticmethod
    def _is_descendant(parent: List[int], node: int, ancestor: int) -> bool:
        while node > 0:
            if node == ancestor:
                return True
            node = parent[node]
        return False

    @staticmethod
    def _crosses_fixed_arc(parent: List[int], head: int, dep: int) -> bool:
        for k in range(1, len(parent)):
            if k == dep or parent[k] == -1:
                continue
            if arcs_cross(head, dep, parent[k], k):
                return True
        return False


class EisnerParser(BaseParser):
    """Exact projective decoding with complete / incomplete spans."""

    name = "eisner-dp"

    def decode(self, tokens: Sequence[Token]) -> List[Arc]:
        scores = self.scorer.score_matrix(tokens, allow_root_dependent=False)
        heads = self.eisner(scores)
        return self._arcs_from_heads(heads, scores)

    @staticmethod
    def eisner(scores: np.ndarray) -> List[int]:
        """
        Args:
            scores: [n+1, n+1], scores[h, d] is the score of arc h -> d, node 0 is ROOT

        Returns:
            heads: [n+1], heads[0] = -1
        """
        size = scores.shape[0]

        # complete[s, t, d] / incomplete[s, t, d]: d=0 headed at t (left), d=1 headed at s (right)
        complete = np.full((size, size, 2), -np.inf)
        incomplete = np.full((size, size, 2), -np.inf)
        complete_bp = np.zeros((size, size, 2), dtype=int)
        incomplete_bp = np.zeros((size, size, 2), dtype=int)

        for s in range(size):
            complete[s, s, :] = 0.0

        for width in range(1, size):
            for s in range(size - width):
                t = s + width

                # Incomplete spans (creating the arc between s and t)
                span = complete[s, s:t, 1] + complete[s + 1:t + 1, t, 0]
                r = int(np.argmax(span))
                incomplete[s, t, 0] = span[r] + scores[t, s]
                incomplete[s, t, 1] = span[r] + scores[s, t]
                incomplete_bp[s, t, :] = s + r

                # Left complete
                span = complete[s, s:t, 0] + incomplete[s:t, t, 0]
                r = int(np.argmax(span))
                complete[s, t, 0] = span[r]
                complete_bp[s, t, 0] = s + r

                # Right complete
                span = incomplete[s, s + 1:t + 1, 1] + complete[s + 1:t + 1, t, 1]
                r = int(np.argmax(span))
                complete[s, t, 1] = span[r]
                complete_bp[s, t, 1] = s + 1 + r

        heads = [-1] * size
        stack = [(0, size - 1, 1, True)]
        while stack:
            s, t, d, is_complete = stack.pop()
            if s == t:
                continue
            if is_complete:
                r = complete_bp[s, t, d]
                if d == 0:
                    stack.append((s, r, 0, True))
                    stack.append((r, t, 0, False))
                else:
                    stack.append((s, r, 1, False))
                    stack.append((r, t, 1, True))
            else:
                r = incomplete_bp[s, t, d]
                if d == 0:
                    heads[s] = t
                else:
                    heads[t] = s
                stack.append((s, r, 1, True))
                stack.append((r + 1, t, 0, True))

        return heads
