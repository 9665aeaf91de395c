"""
Tests for attachment scores and structural tree checks.
"""
import unittest

from depparse.data.structures import Arc
from depparse.evaluation.metrics import (
    compute_uas, compute_las, compute_metrics_by_distance,
    arcs_cross, crossing_arcs, is_projective, is_single_headed, has_cycle, is_tree,
)


class TestAttachmentScores(unittest.TestCase):

    def test_uas(self):
        self.assertEqual(compute_uas([2, 0, 2], [2, 0, 0]), (2, 3))

    def test_las_requires_matching_label(self):
        correct, total = compute_las([2, 0, 2], ['det', 'root', 'obj'],
                                     [2, 0, 2], ['det', 'root', 'nsubj'])
        self.assertEqual((correct, total), (2, 3))

    def test_metrics_by_distance(self):
        stats = compute_metrics_by_distance([2, 0, 2], [2, 0, 0])
        self.assertEqual(stats[1]['total'], 1)
        self.assertEqual(stats[1]['accuracy'], 100.0)
        self.assertEqual(stats[3]['correct'], 0)


class TestStructuralChecks(unittest.TestCase):

    def test_crossing_arcs(self):
        self.assertTrue(arcs_cross(1, 3, 2, 4))
        self.assertTrue(arcs_cross(4, 2, 3, 1))
        self.assertFalse(arcs_cross(1, 4, 2, 3))  # nested
        self.assertFalse(arcs_cross(1, 2, 2, 3))  # shared endpoint
        self.assertFalse(arcs_cross(1, 2, 3, 4))  # disjoint

    def test_projectivity(self):
        # 1 <- 3, 2 <- 0, 3 <- 0: arc (0,2) crosses (3,1)
        heads = [3, 0, 0]
        self.assertFalse(is_projective(heads))
        self.assertEqual(len(crossing_arcs(heads)), 1)
        self.assertTrue(is_projective([2, 0, 2]))

    def test_cycles(self):
        self.assertTrue(has_cycle([2, 3, 1]))
        self.assertTrue(has_cycle([0, 3, 2]))
        self.assertFalse(has_cycle([2, 0, 2]))
        self.assertFalse(has_cycle([]))

    def test_is_tree(self):
        self.assertTrue(is_tree([2, 0, 2]))
        self.assertFalse(is_tree([1, 0]))      # self loop
        self.assertFalse(is_tree([-1, 0]))     # unattached
        self.assertFalse(is_tree([5, 0]))      # out of range
        self.assertFalse(is_tree([2, 1]))      # cycle

    def test_single_headed(self):
        self.assertTrue(is_single_headed([Arc(2, 1), Arc(0, 2)], 2))
        self.assertTrue(is_single_headed([(2, 1), (0, 2)], 2))
        self.assertFalse(is_single_headed([(2, 1), (0, 1)], 2))
        self.assertFalse(is_single_headed([(0, 2)], 2))


if __name__ == '__main__':
    unittest.main()
