"""
Uniqueness queries over a snapshot of Contours.

Every function here takes the list of Contours as an argument instead of
reading it from the cluster, so results are only as fresh as the snapshot.
Two Contours created concurrently with the same spec namespace are detected
once both show up in a later list; nothing here prevents the race.

The store-backed wrappers live in contour_operator.utils.kubernetes.
"""

import logging
from collections.abc import Sequence

from contour_operator.models.contour import Contour

logger = logging.getLogger(__name__)


def other_contours_exist(
    contour: Contour, contours: Sequence[Contour]
) -> tuple[bool, list[Contour] | None]:
    """
    Check whether any Contour other than contour exists.

    Only the two trivial cases are decided here: an empty snapshot, or a
    snapshot holding a single Contour named like contour. Anything else
    reports True and hands back the whole snapshot for callers to filter.

    Args:
        contour: The Contour doing the asking
        contours: Snapshot of all Contours in the cluster

    Returns:
        Tuple of (exist, contours)
        - exist: True if other Contours may exist
        - contours: The full snapshot when exist is True, None otherwise
    """
    if len(contours) == 0 or (len(contours) == 1 and contours[0].name == contour.name):
        return False, None
    return True, list(contours)


def other_contours_exist_in_spec_ns(
    contour: Contour, contours: Sequence[Contour]
) -> bool:
    """
    Check whether another Contour governs the same spec namespace as contour.

    The snapshot may include contour itself; it is skipped by identity
    (namespace and name) before comparing spec namespaces.

    Args:
        contour: The Contour doing the asking
        contours: Snapshot of all Contours in the cluster

    Returns:
        True if another Contour shares contour's spec.namespace.name
    """
    exist, others = other_contours_exist(contour, contours)
    if not exist:
        return False

    spec_ns = contour.spec.namespace.name
    for other in others:
        if other.namespace == contour.namespace and other.name == contour.name:
            continue
        if other.spec.namespace.name == spec_ns:
            logger.debug(
                f"Contour {other.namespace}/{other.name} also governs "
                f"namespace {spec_ns}"
            )
            return True
    return False


def gateway_class_refs_exist(contours: Sequence[Contour], name: str) -> list[Contour]:
    """
    Find the Contours that reference the GatewayClass named name.

    Args:
        contours: Snapshot of all Contours in the cluster
        name: GatewayClass name

    Returns:
        Matching Contours in snapshot order (empty if none)
    """
    return [
        c
        for c in contours
        if c.spec.gateway_class_ref is not None and c.spec.gateway_class_ref == name
    ]
