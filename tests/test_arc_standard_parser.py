"""
Tests for the arc-standard transition system and parser.
"""
import random
import unittest

from depparse.data.structures import Token
from depparse.evaluation.metrics import is_single_headed, has_cycle
from depparse.models.arc_standard_parser import ArcStandardParser
from depparse.models.transition_system import (
    ActionType, ArcStandardTransitionSystem, ParserState, SHIFT, LEFT_ARC, RIGHT_ARC,
)

CATEGORIES = ['Verb', 'Noun', 'Adjective', 'Adverb', 'Determiner', 'Preposition', 'Other']


class TestTransitionSystem(unittest.TestCase):

    def setUp(self):
        self.system = ArcStandardTransitionSystem()

    def test_initial_state(self):
        state = ParserState.initial(4)
        self.assertEqual(state.stack, [0])
        self.assertEqual(state.buffer, [1, 2, 3])
        self.assertFalse(state.is_terminal())
        self.assertEqual(self.system.get_valid_actions(state), [SHIFT])

    def test_apply_does_not_mutate(self):
        state = ParserState.initial(3)
        new_state = self.system.apply(state, SHIFT)
        self.assertEqual(state.stack, [0])
        self.assertEqual(new_state.stack, [0, 1])

    def test_arcs(self):
        state = ParserState.initial(3)
        state = self.system.apply(state, SHIFT)
        state = self.system.apply(state, SHIFT)
        left = self.system.apply(state, LEFT_ARC)
        self.assertEqual(left.arcs, [(2, 1)])
        self.assertEqual(left.stack, [0, 2])
        right = self.system.apply(left, RIGHT_ARC)
        self.assertEqual(right.arcs, [(2, 1), (0, 2)])
        self.assertTrue(right.is_terminal())

    def test_root_cannot_be_dependent(self):
        state = self.system.apply(ParserState.initial(2), SHIFT)
        self.assertNotIn(LEFT_ARC, self.system.get_valid_actions(state))
        with self.assertRaises(ValueError):
            self.system.apply(state, LEFT_ARC)

    def test_oracle_rebuilds_projective_tree(self):
        heads = [2, 3, 0, 3, 6, 4]
        actions = self.system.oracle(heads)
        self.assertEqual(len(actions), 2 * len(heads))
        state = self.system.run(len(heads) + 1, actions)
        self.assertTrue(state.is_terminal())
        self.assertEqual(state.heads[1:], heads)

    def test_oracle_rejects_non_projective_tree(self):
        with self.assertRaises(ValueError):
            self.system.oracle([3, 0, 0, 2])

    def test_shift_on_empty_buffer(self):
        state = self.system.apply(ParserState.initial(2), SHIFT)
        with self.assertRaises(ValueError):
            self.system.apply(state, SHIFT)


class TestArcStandardParser(unittest.TestCase):

    def setUp(self):
        self.parser = ArcStandardParser()

    def test_determiner_noun_verb(self):
        tokens = [Token('the', 'Determiner', 1), Token('cat', 'Noun', 2), Token('sat', 'Verb', 3)]
        arcs, actions = self.parser.decode_with_transitions(tokens)
        pairs = {(a.head, a.dependent) for a in arcs}
        self.assertEqual(pairs, {(2, 1), (3, 2), (0, 3)})
        self.assertEqual([a.type for a in actions], [
            ActionType.SHIFT, ActionType.SHIFT, ActionType.LEFT_ARC,
            ActionType.SHIFT, ActionType.LEFT_ARC, ActionType.RIGHT_ARC,
        ])
        self.assertTrue(actions[-1].forced)

    def test_edges_use_node_ids(self):
        tokens = [Token('the', 'Determiner', 1), Token('cat', 'Noun', 2), Token('sat', 'Verb', 3)]
        edges = {(e.source, e.target) for e in self.parser.parse_result(tokens).edges}
        self.assertIn(('cat_1', 'the_0'), edges)
        self.assertIn(('sat_2', 'cat_1'), edges)

    def test_one_arc_per_token_within_2n_transitions(self):
        rng = random.Random(0)
        for _ in range(200):
            n = rng.randint(1, 12)
            tokens = [Token(f"w{i}", rng.choice(CATEGORIES), i) for i in range(1, n + 1)]
            arcs, actions = self.parser.decode_with_transitions(tokens)
            self.assertEqual(len(arcs), n)
            self.assertLessEqual(len(actions), 2 * n)
            self.assertTrue(is_single_headed(arcs, n))
            heads = [None] * n
            for arc in arcs:
                heads[arc.dependent - 1] = arc.head
            self.assertFalse(has_cycle(heads))

    def test_high_threshold_forces_every_arc(self):
        parser = ArcStandardParser(arc_threshold=1.0)
        tokens = [Token('the', 'Determiner', 1), Token('cat', 'Noun', 2), Token('sat', 'Verb', 3)]
        arcs, actions = parser.decode_with_transitions(tokens)
        self.assertEqual(len(arcs), 3)
        self.assertEqual([a.type for a in actions[:3]], [ActionType.SHIFT] * 3)
        self.assertTrue(all(a.forced for a in actions[3:]))

    def test_empty(self):
        self.assertEqual(self.parser.parse([]).arcs, ())
        self.assertTrue(self.parser.parse_result([]).is_empty)

    def test_single_token_attaches_to_root(self):
        arcs, actions = self.parser.decode_with_transitions([Token('Run', 'Verb', 1)])
        self.assertEqual([(a.head, a.dependent) for a in arcs], [(0, 1)])
        self.assertEqual(len(actions), 2)


if __name__ == '__main__':
    unittest.main()
