"""
Arc-standard parser driven by arc scores

At every step the two arc transitions are scored against a fixed threshold;
SHIFT is taken when neither clears it. Once the buffer is empty the better of
the two arcs is forced, so every sentence ends with exactly one arc per token
after at most 2n transitions.
"""

from typing import List, Optional, Sequence, Tuple

from depparse.data.structures import Token, Arc, ROOT
from depparse.models.base_parser import BaseParser
from depparse.models.scorer import ArcScorer
from depparse.models.transition_system import (
    Action, ActionType, ArcStandardTransitionSystem, ParserState, SHIFT, LEFT_ARC, RIGHT_ARC,
)
from depparse.utils.constants import config

DEFAULT_ARC_THRESHOLD = 0.3


class ArcStandardParser(BaseParser):
    """Deterministic shift-reduce parser over a stack and a buffer."""

    name = "arc-standard"

    def __init__(self, scorer: Optional[ArcScorer] = None, arc_threshold: Optional[float] = None):
        super().__init__(scorer)
        if arc_threshold is None:
            arc_threshold = config.get('transition', {}).get('arc_threshold', DEFAULT_ARC_THRESHOLD)
        self.arc_threshold = float(arc_threshold)
        self.system = ArcStandardTransitionSystem()

    def decode(self, tokens: Sequence[Token]) -> List[Arc]:
        return self.decode_with_transitions(tokens)[0]

    def decode_with_transitions(self, tokens: Sequence[Token]) -> Tuple[List[Arc], List[Action]]:
        words = [ROOT] + list(tokens)
        state = ParserState.initial(len(words))
        transitions = []

        while not state.is_terminal():
            action = self.next_action(state, words)
            state = self.system.apply(state, action)
            transitions.append(action)

        arcs = [Arc(head=h, dependent=d, weight=self.scorer.score_tokens(words[h], words[d]))
                for h, d in state.arcs]
        return arcs, transitions

    def next_action(self, state: ParserState, words: Sequence[Token]) -> Action:
        if len(state.stack) < 2:
            return SHIFT

        top, second = state.top, state.second

        # Score left-arc (top -> second) vs right-arc (second -> top)
        left_score = self.scorer.score_tokens(words[top], words[second])
        right_score = self.scorer.score_tokens(words[second], words[top])

        if right_score > left_score and right_score > self.arc_threshold:
            return RIGHT_ARC
        if left_score > self.arc_threshold and second != 0:  # ROOT cannot have a head
            return LEFT_ARC
        if state.can_shift():
            return SHIFT

        # Buffer is empty: force a decision
        if right_score >= left_score or second == 0:
            return Action(ActionType.RIGHT_ARC, forced=True)
        return Action(ActionType.LEFT_ARC, forced=True)
