from .metrics import (
    compute_uas, compute_las, compute_metrics_by_distance,
    arcs_cross, crossing_arcs, is_projective, is_single_headed, has_cycle, is_tree,
)

__all__ = [
    'compute_uas', 'compute_las', 'compute_metrics_by_distance',
    'arcs_cross', 'crossing_arcs', 'is_projective', 'is_single_headed', 'has_cycle', 'is_tree',
]
