"""
MST Parser - Graph-based parsing with maximum spanning arborescences

Reference: McDonald et al. (2005) "Non-projective Dependency Parsing using Spanning Tree Algorithms"

- ArborescenceParser: Chu-Liu-Edmonds with cycle contraction, always a tree
- GreedyHeadParser: independent best incoming arc per token, may contain cycles
"""

from typing import List, Sequence

import numpy as np

from depparse.data.structures import Token, Arc
from depparse.models.base_parser import BaseParser
from depparse.utils.logs import logger


def find_cycle(heads: Sequence[int]) -> List[int]:
    """Find a cycle in a head array (heads[0] is ROOT). Returns the nodes in the cycle."""
    size = len(heads)
    visited = [0] * size  # 0: unvisited, 1: visiting, 2: visited
    visited[0] = 2

    for i in range(1, size):
        if visited[i] != 0:
            continue
        curr = i
        path = []
        while visited[curr] == 0:
            visited[curr] = 1
            path.append(curr)
            curr = heads[curr]

        if visited[curr] == 1:
            return path[path.index(curr):]

        for node in path:
            visited[node] = 2
    return []


def chu_liu_edmonds(scores: np.ndarray) -> np.ndarray:
    """
    Maximum spanning arborescence rooted at node 0.

    Args:
        scores: [n+1, n+1], scores[h, d] is the score of arc h -> d

    Returns:
        heads: [n+1], heads[0] = -1
    """
    scores = np.array(scores, dtype=float)
    np.fill_diagonal(scores, -np.inf)
    scores[:, 0] = -np.inf

    heads = scores.argmax(axis=0)
    heads[0] = -1

    cycle = find_cycle(heads)
    if not cycle:
        return heads

    logger.debug(f"Contracting cycle {cycle} over {scores.shape[0] - 1} nodes")

    # Contract the cycle into a single node c
    in_cycle = set(cycle)
    outside = [v for v in range(scores.shape[0]) if v not in in_cycle]
    m = len(outside)
    c = m
    cycle_idx = np.array(cycle)

    contracted = np.full((m + 1, m + 1), -np.inf)
    contracted[:m, :m] = scores[np.ix_(outside, outside)]

    # Entering arc u -> v replaces the cycle arc heads[v] -> v
    enter_gain = scores[np.ix_(outside, cycle)] - scores[heads[cycle_idx], cycle_idx]
    enter_best = enter_gain.argmax(axis=1)
    contracted[:m, c] = enter_gain[np.arange(m), enter_best]

    # Leaving arc: best cycle member as head of each outside node
    leave = scores[np.ix_(cycle, outside)]
    leave_best = leave.argmax(axis=0)
    contracted[c, :m] = leave[leave_best, np.arange(m)]

    sub_heads = chu_liu_edmonds(contracted)

    # Expand
    result = heads.copy()
    for iv, v in enumerate(outside):
        if v == 0:
            continue
        h = sub_heads[iv]
        result[v] = cycle[leave_best[iv]] if h == c else outside[h]

    entering = sub_heads[c]
    result[cycle[enter_best[entering]]] = outside[entering]
    return result


class ArborescenceParser(BaseParser):
    """Maximum Spanning Tree Parser using the Chu-Liu-Edmonds algorithm."""

    name = "arborescence"

    def decode(self, tokens: Sequence[Token]) -> List[Arc]:
        scores = self.scorer.score_matrix(tokens, allow_root_dependent=False)
        heads = chu_liu_edmonds(scores)
        return self._arcs_from_heads(heads, scores)


class GreedyHeadParser(BaseParser):
    """Best incoming arc per token, chosen independently (no cycle repair)."""

    name = "greedy-heads"

    def decode(self, tokens: Sequence[Token]) -> List[Arc]:
        scores = self.scorer.score_matrix(tokens, allow_root_dependent=False)
        heads = scores.argmax(axis=0)
        heads[0] = -1
        return self._arcs_from_heads(heads, scores)
