"""
Tests for Chu-Liu/Edmonds and the naive best-incoming-arc parser.
"""
import itertools
import random
import unittest

import numpy as np
from loguru import logger

from depparse.data.structures import Token
from depparse.evaluation.metrics import has_cycle, is_tree
from depparse.models.mst_parser import ArborescenceParser, GreedyHeadParser, chu_liu_edmonds, find_cycle
from depparse.models.scorer import ArcScorer, ScoreTable

CATEGORIES = ['Verb', 'Noun', 'Adjective', 'Adverb', 'Determiner', 'Preposition', 'Other']


def cyclic_scorer():
    # Every token prefers the next category round the loop as head
    table = ScoreTable({'Noun': {'Verb': 1.0}, 'Verb': {'Adjective': 1.0}, 'Adjective': {'Noun': 1.0}},
                       default=0.1)
    return ArcScorer(table)


CYCLIC_TOKENS = [Token('dogs', 'Noun', 1), Token('bark', 'Verb', 2), Token('loud', 'Adjective', 3)]


class TestFindCycle(unittest.TestCase):

    def test_cycle(self):
        self.assertEqual(sorted(find_cycle([-1, 3, 1, 2])), [1, 2, 3])
        self.assertEqual(sorted(find_cycle([-1, 0, 3, 2])), [2, 3])

    def test_no_cycle(self):
        self.assertEqual(find_cycle([-1, 0, 1, 1]), [])


class TestChuLiuEdmonds(unittest.TestCase):

    def test_optimal_against_brute_force(self):
        rng = np.random.default_rng(0)
        for n in range(1, 6):
            for _ in range(5):
                scores = rng.random((n + 1, n + 1))
                np.fill_diagonal(scores, -np.inf)
                scores[:, 0] = -np.inf

                best = max(
                    sum(scores[h][d] for d, h in enumerate(heads, start=1))
                    for heads in itertools.product(range(n + 1), repeat=n)
                    if is_tree(list(heads))
                )
                heads = chu_liu_edmonds(scores)
                self.assertEqual(heads[0], -1)
                self.assertTrue(is_tree(list(heads[1:])))
                self.assertAlmostEqual(sum(scores[heads[d]][d] for d in range(1, n + 1)), best)


class TestArborescenceParser(unittest.TestCase):

    def test_breaks_three_cycle(self):
        parser = ArborescenceParser(scorer=cyclic_scorer())
        tree = parser.parse(CYCLIC_TOKENS)
        self.assertTrue(tree.is_tree())
        self.assertEqual(tree.heads, [0, 1, 2])

    def test_random_sentences_are_trees(self):
        parser = ArborescenceParser()
        rng = random.Random(0)
        for _ in range(100):
            n = rng.randint(1, 12)
            tokens = [Token(f"w{i}", rng.choice(CATEGORIES), i) for i in range(1, n + 1)]
            tree = parser.parse(tokens)
            self.assertEqual(len(tree.arcs), n)
            self.assertTrue(tree.is_tree(), tree.heads)

    def test_empty(self):
        self.assertTrue(ArborescenceParser().parse_result([]).is_empty)

    def test_logs_each_contraction_once(self):
        messages = []
        logger.enable("depparse")
        handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
        try:
            ArborescenceParser(scorer=cyclic_scorer()).parse(CYCLIC_TOKENS)
            contractions = [m for m in messages if "Contracting cycle" in m]
            self.assertEqual(len(contractions), 1)
            self.assertIn("over 3 nodes", contractions[0])

            messages.clear()
            ArborescenceParser().parse([Token('bark', 'Verb', 1)])
            self.assertFalse([m for m in messages if "Contracting cycle" in m])
        finally:
            logger.remove(handler_id)
            logger.disable("depparse")


class TestGreedyHeadParser(unittest.TestCase):

    def test_keeps_naive_cycle(self):
        parser = GreedyHeadParser(scorer=cyclic_scorer())
        heads = parser.parse(CYCLIC_TOKENS).heads
        self.assertEqual(heads, [3, 1, 2])
        self.assertTrue(has_cycle(heads))

    def test_every_token_gets_best_head(self):
        parser = GreedyHeadParser()
        tokens = [Token('the', 'Determiner', 1), Token('cat', 'Noun', 2), Token('sat', 'Verb', 3)]
        scores = parser.scorer.score_matrix(tokens, allow_root_dependent=False)
        heads = parser.parse(tokens).heads
        for d, h in enumerate(heads, start=1):
            self.assertEqual(scores[h][d], scores[:, d].max())


if __name__ == '__main__':
    unittest.main()
