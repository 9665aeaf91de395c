"""
Metrics for dependency parsing

Head lists are per token: heads[k] is the head of token k+1 (0 = ROOT).
"""
from typing import List, Tuple, Dict, Iterable, Sequence
from collections import defaultdict


def compute_uas(pred_heads: Sequence[int], gold_heads: Sequence[int]) -> Tuple[int, int]:
    """
    Unlabeled Attachment Score counts

    Returns:
        Tuple (correct, total)
    """
    correct = 0
    total = 0

    for pred, gold in zip(pred_heads, gold_heads):
        if pred == gold:
            correct += 1
        total += 1

    return correct, total


def compute_las(pred_heads: Sequence[int], pred_rels: Sequence[str],
                gold_heads: Sequence[int], gold_rels: Sequence[str]) -> Tuple[int, int]:
    """
    Labeled Attachment Score counts: head and relation must both match

    Returns:
        Tuple (correct, total)
    """
    correct = 0
    total = 0

    for i in range(len(gold_heads)):
        if pred_heads[i] == gold_heads[i] and pred_rels[i] == gold_rels[i]:
            correct += 1
        total += 1

    return correct, total


def compute_metrics_by_distance(pred_heads: Sequence[int], gold_heads: Sequence[int]) -> Dict[int, Dict]:
    """
    Attachment accuracy grouped by gold head-dependent distance

    Returns:
        Dict: {distance: {'correct': int, 'total': int, 'accuracy': float}}
    """
    stats = defaultdict(lambda: {'correct': 0, 'total': 0})

    for k, gold in enumerate(gold_heads):
        distance = abs(gold - (k + 1))
        stats[distance]['total'] += 1

        if pred_heads[k] == gold:
            stats[distance]['correct'] += 1

    for dist, data in stats.items():
        if data['total'] > 0:
            data['accuracy'] = data['correct'] / data['total'] * 100
        else:
            data['accuracy'] = 0.0

    return dict(stats)


def arcs_cross(head1: int, dep1: int, head2: int, dep2: int) -> bool:
    """Two arcs cross when exactly one endpoint of one lies strictly inside the other."""
    a1, a2 = min(head1, dep1), max(head1, dep1)
    b1, b2 = min(head2, dep2), max(head2, dep2)
    return (a1 < b1 < a2 < b2) or (b1 < a1 < b2 < a2)


def crossing_arcs(heads: Sequence[int]) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
    """All pairs of crossing (head, dependent) arcs."""
    arcs = [(h, k + 1) for k, h in enumerate(heads) if h >= 0]
    crossings = []
    for x in range(len(arcs)):
        for y in range(x + 1, len(arcs)):
            if arcs_cross(*arcs[x], *arcs[y]):
                crossings.append((arcs[x], arcs[y]))
    return crossings


def is_projective(heads: Sequence[int]) -> bool:
    return not crossing_arcs(heads)


def is_single_headed(arcs: Iterable, n: int) -> bool:
    """Every token 1..n is the dependent of exactly one arc, and ROOT of none."""
    counts = defaultdict(int)
    for arc in arcs:
        head, dep = (arc.head, arc.dependent) if hasattr(arc, 'dependent') else arc[:2]
        counts[dep] += 1
    return set(counts) == set(range(1, n + 1)) and all(c == 1 for c in counts.values())


def has_cycle(heads: Sequence[int]) -> bool:
    """Follow head pointers from every token; a revisited node means a cycle."""
    n = len(heads)
    for start in range(1, n + 1):
        visited = set()
        current = start
        while current > 0:
            if current in visited:
                return True
            visited.add(current)
            current = heads[current - 1] if current <= n else -1
    return False


def is_tree(heads: Sequence[int]) -> bool:
    n = len(heads)
    for k, h in enumerate(heads):
        if h < 0 or h > n or h == k + 1:
            return False
    return not has_cycle(heads)
