from .scorer import ScoreTable, ArcScorer
from .base_parser import BaseParser
from .projective_parser import GreedyProjectiveParser, EisnerParser
from .mst_parser import ArborescenceParser, GreedyHeadParser, chu_liu_edmonds, find_cycle
from .transition_system import ActionType, Action, ParserState, ArcStandardTransitionSystem
from .arc_standard_parser import ArcStandardParser
from .relations import label_arc, describe_relation
from .parser_factory import ParserType, ParserFactory

__all__ = [
    'ScoreTable', 'ArcScorer',
    'BaseParser',
    'GreedyProjectiveParser', 'EisnerParser',
    'ArborescenceParser', 'GreedyHeadParser', 'chu_liu_edmonds', 'find_cycle',
    'ActionType', 'Action', 'ParserState', 'ArcStandardTransitionSystem',
    'ArcStandardParser',
    'label_arc', 'describe_relation',
    'ParserType', 'ParserFactory',
]
