"""
Core data structures for dependency parsing

A sentence is a sequence of 1-indexed ``Token`` objects; index 0 is reserved
for the synthetic ROOT token. Parsers produce a ``DependencyTree`` (one head
per token) which is projected into a render-ready ``ParseResult``.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import List, Dict, Any, Optional, Sequence, Tuple

from depparse.utils.constants import ROOT_TOKEN, ROOT_NODE_ID


class PosCategory(str, Enum):
    NOUN = "Noun"
    VERB = "Verb"
    ADJECTIVE = "Adjective"
    ADVERB = "Adverb"
    DETERMINER = "Determiner"
    PREPOSITION = "Preposition"
    ROOT = "ROOT"
    OTHER = "Other"

    @classmethod
    def from_upos(cls, tag: Optional[str]) -> 'PosCategory':
        """Map a Universal (or Penn Treebank) POS tag onto the coarse category set."""
        if not tag:
            return cls.OTHER
        tag = tag.upper()
        if tag in _UPOS_TO_CATEGORY:
            return _UPOS_TO_CATEGORY[tag]
        for prefix, category in _PENN_PREFIXES:
            if tag.startswith(prefix):
                return category
        return cls.OTHER


_UPOS_TO_CATEGORY = {
    "NOUN": PosCategory.NOUN,
    "PROPN": PosCategory.NOUN,
    "PRON": PosCategory.NOUN,
    "NUM": PosCategory.NOUN,
    "VERB": PosCategory.VERB,
    "AUX": PosCategory.VERB,
    "ADJ": PosCategory.ADJECTIVE,
    "ADV": PosCategory.ADVERB,
    "DET": PosCategory.DETERMINER,
    "ADP": PosCategory.PREPOSITION,
    "DT": PosCategory.DETERMINER,
    "IN": PosCategory.PREPOSITION,
    "PRP": PosCategory.NOUN,
    "MD": PosCategory.VERB,
}

_PENN_PREFIXES = (
    ("NN", PosCategory.NOUN),
    ("VB", PosCategory.VERB),
    ("JJ", PosCategory.ADJECTIVE),
    ("RB", PosCategory.ADVERB),
)


@dataclass(frozen=True)
class Token:
    """A tagged word. ``index`` is 1-based; 0 is ROOT."""
    text: str
    pos: str
    index: int

    @property
    def node_id(self) -> str:
        if self.index == 0:
            return ROOT_NODE_ID
        return f"{self.text}_{self.index - 1}"


ROOT = Token(text=ROOT_TOKEN, pos=PosCategory.ROOT.value, index=0)


@dataclass(frozen=True)
class Arc:
    """A directed head -> dependent relation between token indices."""
    head: int
    dependent: int
    weight: float = 0.0
    label: Optional[str] = None


@dataclass(frozen=True)
class Node:
    id: str
    label: str
    pos: str
    weight: float


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    weight: float
    label: Optional[str] = None


@dataclass
class ParseResult:
    """Render-ready projection of a dependency tree."""
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    @classmethod
    def empty(cls) -> 'ParseResult':
        return cls(nodes=[], edges=[])

    @property
    def is_empty(self) -> bool:
        return not self.nodes and not self.edges

    def to_dict(self) -> Dict[str, Any]:
        return {
            'nodes': [asdict(node) for node in self.nodes],
            'edges': [asdict(edge) for edge in self.edges],
        }


class DependencyTree:
    """
    Head assignment over the tokens of one sentence.

    Attributes:
        tokens: the sentence tokens (1-indexed, without ROOT)
        arcs: one arc per token, in the order the parser produced them
    """

    def __init__(self, tokens: Sequence[Token], arcs: Sequence[Arc]):
        self.tokens: Tuple[Token, ...] = tuple(tokens)
        self.arcs: Tuple[Arc, ...] = tuple(arcs)

    def __len__(self):
        return len(self.tokens)

    def __repr__(self):
        return f"{self.__class__.__name__}(n_tokens={len(self.tokens)}, heads={self.heads})"

    @property
    def heads(self) -> List[int]:
        """heads[k] is the head index of token k+1 (0 = ROOT, -1 = unattached)."""
        heads = [-1] * len(self.tokens)
        for arc in self.arcs:
            heads[arc.dependent - 1] = arc.head
        return heads

    @property
    def parents(self) -> List[int]:
        """Head array indexed by token index, ``parents[0] == -1`` for ROOT."""
        return [-1] + self.heads

    def token(self, index: int) -> Token:
        return ROOT if index == 0 else self.tokens[index - 1]

    def children(self, index: int) -> List[int]:
        return sorted(arc.dependent for arc in self.arcs if arc.head == index)

    def is_projective(self) -> bool:
        from depparse.evaluation.metrics import is_projective
        return is_projective(self.heads)

    def has_cycle(self) -> bool:
        from depparse.evaluation.metrics import has_cycle
        return has_cycle(self.heads)

    def is_tree(self) -> bool:
        from depparse.evaluation.metrics import is_tree
        return is_tree(self.heads)

    def to_parse_result(self) -> ParseResult:
        if not self.tokens:
            return ParseResult.empty()

        nodes = [Node(id=ROOT_NODE_ID, label=ROOT_TOKEN, pos=PosCategory.ROOT.value, weight=2)]
        nodes.extend(
            Node(id=token.node_id, label=token.text, pos=token.pos, weight=1)
            for token in self.tokens
        )

        edges = [
            Edge(
                source=self.token(arc.head).node_id,
                target=self.token(arc.dependent).node_id,
                weight=arc.weight,
                label=arc.label,
            )
            for arc in self.arcs
        ]
        return ParseResult(nodes=nodes, edges=edges)
