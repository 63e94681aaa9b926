"""
Utils package - Utility modules for Contour operator functionality.

Contains helper modules for:
- Owning labels and selectors
- Uniqueness queries over Contour snapshots
- Kubernetes store access
- Contour validation
"""

from contour_operator.utils.ownership import (
    owner_labels,
    owner_labels_exist,
    owning_label_selector,
    owning_selector,
)
from contour_operator.utils.registry import (
    gateway_class_refs_exist,
    other_contours_exist,
    other_contours_exist_in_spec_ns,
)

__all__ = [
    "owner_labels",
    "owner_labels_exist",
    "owning_selector",
    "owning_label_selector",
    "other_contours_exist",
    "other_contours_exist_in_spec_ns",
    "gateway_class_refs_exist",
]
