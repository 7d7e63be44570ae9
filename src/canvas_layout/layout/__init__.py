"""Layout algorithms for node-link graphs.

Force-directed placement for arbitrary graphs, radial placement for trees, and
a normalizer fitting either result into a square viewport.
"""

from .classify import Topology, TreeVerdict, classify_topology, connected_components, is_tree
from .depth import SubtreeMetrics, compute_subtree_metrics
from .force import ForceConfig, cooling_factor, fruchterman_reingold
from .normalize import DEFAULT_VIEWPORT, bounding_box, recalibrate
from .radial import DEFAULT_RADIUS_STEP, AngularSlot, assign_angular_slots, radial_layout
from .worker import LayoutJob

__all__ = [
    "Topology",
    "TreeVerdict",
    "is_tree",
    "classify_topology",
    "connected_components",
    "SubtreeMetrics",
    "compute_subtree_metrics",
    "ForceConfig",
    "cooling_factor",
    "fruchterman_reingold",
    "DEFAULT_VIEWPORT",
    "bounding_box",
    "recalibrate",
    "DEFAULT_RADIUS_STEP",
    "AngularSlot",
    "assign_angular_slots",
    "radial_layout",
    "LayoutJob",
]
