"""
Arc-standard transition system

A configuration is a stack (ROOT at the bottom), a buffer of unread token
indices and the arcs built so far. Three transitions:

- SHIFT      push the front of the buffer onto the stack
- LEFT-ARC   top -> second, second is popped (ROOT never becomes a dependent)
- RIGHT-ARC  second -> top, top is popped

Any sentence of n tokens is consumed in exactly 2n transitions.

Reference: Nivre (2004) "Incrementality in Deterministic Dependency Parsing"
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple


class ActionType(Enum):
    SHIFT = "SHIFT"
    LEFT_ARC = "LEFT-ARC"
    RIGHT_ARC = "RIGHT-ARC"


@dataclass(frozen=True)
class Action:
    type: ActionType
    forced: bool = False  # arc taken only because the buffer ran out

    def __repr__(self):
        return f"{self.type.value}!" if self.forced else self.type.value


SHIFT = Action(ActionType.SHIFT)
LEFT_ARC = Action(ActionType.LEFT_ARC)
RIGHT_ARC = Action(ActionType.RIGHT_ARC)


@dataclass
class ParserState:
    """
    Attributes:
        stack: token indices, ROOT (0) at the bottom
        buffer: unread token indices, front first
        heads: head per position (position 0 is ROOT, -1 = unattached)
        arcs: (head, dependent) pairs in creation order
    """
    stack: List[int] = field(default_factory=lambda: [0])
    buffer: List[int] = field(default_factory=list)
    heads: List[int] = field(default_factory=list)
    arcs: List[Tuple[int, int]] = field(default_factory=list)

    @classmethod
    def initial(cls, sentence_length: int) -> 'ParserState':
        """``sentence_length`` counts ROOT."""
        return cls(
            stack=[0],
            buffer=list(range(1, sentence_length)),
            heads=[-1] * sentence_length,
            arcs=[],
        )

    @property
    def sentence_length(self) -> int:
        return len(self.heads)

    @property
    def top(self) -> Optional[int]:
        return self.stack[-1] if self.stack else None

    @property
    def second(self) -> Optional[int]:
        return self.stack[-2] if len(self.stack) > 1 else None

    def is_terminal(self) -> bool:
        return not self.buffer and len(self.stack) == 1

    def can_shift(self) -> bool:
        return bool(self.buffer)

    def can_left_arc(self) -> bool:
        return len(self.stack) > 1 and self.stack[-2] != 0

    def can_right_arc(self) -> bool:
        return len(self.stack) > 1

    def copy(self) -> 'ParserState':
        return ParserState(list(self.stack), list(self.buffer), list(self.heads), list(self.arcs))


class ArcStandardTransitionSystem:
    """Applies transitions to parser states; states are never modified in place."""

    def is_valid(self, state: ParserState, action: Action) -> bool:
        if action.type is ActionType.SHIFT:
            return state.can_shift()
        if action.type is ActionType.LEFT_ARC:
            return state.can_left_arc()
        return state.can_right_arc()

    def get_valid_actions(self, state: ParserState) -> List[Action]:
        return [a for a in (SHIFT, LEFT_ARC, RIGHT_ARC) if self.is_valid(state, a)]

    def apply(self, state: ParserState, action: Action) -> ParserState:
        if not self.is_valid(state, action):
            raise ValueError(f"{action!r} is not valid for stack={state.stack} buffer={state.buffer}")

        new_state = state.copy()
        if action.type is ActionType.SHIFT:
            new_state.stack.append(new_state.buffer.pop(0))
            return new_state

        if action.type is ActionType.LEFT_ARC:
            head, dep = new_state.stack[-1], new_state.stack.pop(-2)
        else:
            dep = new_state.stack.pop()
            head = new_state.stack[-1]
        new_state.heads[dep] = head
        new_state.arcs.append((head, dep))
        return new_state

    def run(self, sentence_length: int, actions: Iterable[Action]) -> ParserState:
        """Apply a whole transition sequence to a fresh state."""
        state = ParserState.initial(sentence_length)
        for action in actions:
            state = self.apply(state, action)
        return state

    def oracle(self, heads: Sequence[int]) -> List[Action]:
        """
        Static oracle: the transition sequence that rebuilds a gold tree.

        Args:
            heads: per token, heads[k] is the head of token k+1 (0 = ROOT)

        Raises:
            ValueError: the tree is not projective (arc-standard cannot build it)
        """
        gold = [-1] + list(heads)
        pending = [0] * len(gold)  # dependents not yet attached
        for h in heads:
            pending[h] += 1

        state = ParserState.initial(len(gold))
        actions = []
        while not state.is_terminal():
            top, second = state.top, state.second
            if second is not None and second != 0 and gold[second] == top and pending[second] == 0:
                action = LEFT_ARC
            elif second is not None and gold[top] == second and pending[top] == 0:
                action = RIGHT_ARC
            elif state.can_shift():
                action = SHIFT
            else:
                raise ValueError(f"Gold tree {list(heads)} is not projective")

            if action is not SHIFT:
                pending[top if action is LEFT_ARC else second] -= 1
            state = self.apply(state, action)
            actions.append(action)
        return actions
