"""Ring detection and analysis."""

from ringbasis.rings.search import RingSearch
from ringbasis.rings.detection import (
    find_sssr,
    find_rings,
    find_ring_systems,
    get_ring_info,
    get_ring_info_fast,
    get_ring_membership,
    get_ring_bonds,
    get_min_ring_sizes,
)

__all__ = [
    "RingSearch",
    "find_sssr",
    "find_rings",
    "find_ring_systems",
    "get_ring_info",
    "get_ring_info_fast",
    "get_ring_membership",
    "get_ring_bonds",
    "get_min_ring_sizes",
]
