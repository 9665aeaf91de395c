"""
depparse: POS-driven dependency parsing

Greedy projective, Eisner, Chu-Liu/Edmonds and arc-standard parsers sharing a
single arc scorer, plus a batch orchestrator over raw text.
"""

from depparse.data import Token, Arc, ParseResult, DependencyTree, PosCategory, SpacyTagger, CallableTagger
from depparse.models import ScoreTable, ArcScorer, ParserFactory, ParserType
from depparse.parsing import ParseConfig, perform_dependency_parsing, parse_samples, ParsingCancelled

__version__ = "0.1.0"

__all__ = [
    'Token', 'Arc', 'ParseResult', 'DependencyTree', 'PosCategory', 'SpacyTagger', 'CallableTagger',
    'ScoreTable', 'ArcScorer', 'ParserFactory', 'ParserType',
    'ParseConfig', 'perform_dependency_parsing', 'parse_samples', 'ParsingCancelled',
]
