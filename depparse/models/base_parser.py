"""
Base class for score-driven dependency parsers
"""

import time
from collections import Counter
from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional, Sequence

from depparse.data.structures import Token, Arc, DependencyTree, ParseResult, ROOT
from depparse.evaluation.metrics import compute_uas, compute_las, is_tree, is_projective
from depparse.models.relations import label_arc
from depparse.models.scorer import ArcScorer


class BaseParser(ABC):
    """
    Abstract base class for the parsers.

    Every parser scores arcs with the same ``ArcScorer``, so trees built by
    different algorithms are comparable.

    Main methods:
    - decode(): Head selection over a token sequence
    - predict(): Parse words + POS tags into head indices
    - parse(): Parse tokens into a DependencyTree
    - evaluate(): UAS / LAS / speed against gold sentences
    """

    name = "base"

    def __init__(self, scorer: Optional[ArcScorer] = None):
        self.scorer = scorer if scorer is not None else ArcScorer.from_config()

    def __repr__(self):
        return f"{self.__class__.__name__}(scorer={self.scorer.table!r})"

    @abstractmethod
    def decode(self, tokens: Sequence[Token]) -> List[Arc]:
        """Return one arc per token (weights filled in, labels optional)."""
        raise NotImplementedError

    def parse(self, tokens: Sequence[Token]) -> DependencyTree:
        tokens = list(tokens)
        if not tokens:
            return DependencyTree([], [])
        arcs = [self._label(tokens, arc) for arc in self.decode(tokens)]
        return DependencyTree(tokens, arcs)

    def parse_result(self, tokens: Sequence[Token]) -> ParseResult:
        return self.parse(tokens).to_parse_result()

    def predict(self, words: List[str], pos_tags: List[str]) -> List[int]:
        """Parse a sentence and return head indices (0 = ROOT, 1-indexed)."""
        return self.parse(self._make_tokens(words, pos_tags)).heads

    def predict_with_labels(self, words: List[str], pos_tags: List[str]):
        tree = self.parse(self._make_tokens(words, pos_tags))
        labels = [None] * len(tree)
        for arc in tree.arcs:
            labels[arc.dependent - 1] = arc.label
        return tree.heads, labels

    @staticmethod
    def _make_tokens(words: List[str], pos_tags: List[str]) -> List[Token]:
        return [Token(text=w, pos=p, index=i + 1) for i, (w, p) in enumerate(zip(words, pos_tags))]

    @staticmethod
    def _label(tokens: Sequence[Token], arc: Arc) -> Arc:
        if arc.label is not None:
            return arc
        head = ROOT if arc.head == 0 else tokens[arc.head - 1]
        dep = tokens[arc.dependent - 1]
        return Arc(arc.head, arc.dependent, arc.weight,
                   label_arc(head.pos, dep.pos, arc.head, arc.dependent))

    def _arcs_from_heads(self, heads: Sequence[int], scores) -> List[Arc]:
        """heads indexed by token index (position 0 unused)."""
        return [Arc(head=int(heads[j]), dependent=j, weight=float(scores[heads[j]][j]))
                for j in range(1, len(heads))]

    def evaluate(self, sentences: List[Dict[str, Any]]) -> Dict[str, float]:
        """
        Score predictions against gold sentences (``words``, ``pos_tags``,
        ``heads`` and optionally ``rels``).

        Returns:
            Dict with 'uas', 'las' (percent), 'speed' (sent/s) and raw counts,
            including how many predictions were well-formed / projective trees
        """
        counts = Counter()

        start_time = time.perf_counter()
        for sent in sentences:
            gold_heads = sent['heads']
            pred_heads, pred_rels = self.predict_with_labels(sent['words'], sent['pos_tags'])

            correct, n = compute_uas(pred_heads, gold_heads)
            counts['uas_correct'] += correct
            counts['total'] += n
            counts['las_correct'] += compute_las(
                pred_heads, pred_rels, gold_heads, sent.get('rels') or [None] * n)[0]
            counts['valid_trees'] += is_tree(pred_heads)
            counts['projective_trees'] += is_projective(pred_heads)
        elapsed = time.perf_counter() - start_time

        total = counts['total']
        return {
            'uas': counts['uas_correct'] / total * 100 if total else 0.0,
            'las': counts['las_correct'] / total * 100 if total else 0.0,
            'speed': len(sentences) / elapsed if elapsed > 0 else 0.0,
            'uas_correct': counts['uas_correct'],
            'las_correct': counts['las_correct'],
            'total': total,
            'num_sentences': len(sentences),
            'valid_trees': counts['valid_trees'],
            'projective_trees': counts['projective_trees'],
            'elapsed_seconds': elapsed,
        }
