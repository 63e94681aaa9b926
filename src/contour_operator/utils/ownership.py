"""
Ownership tracking utilities for objects managed on behalf of a Contour.

Every child object the operator creates for a Contour carries two owning
labels: the Contour's name and the Contour's namespace. Ownership is always
derived from those labels; nothing is stored on the Contour itself.
"""

from collections.abc import Mapping
from typing import Any

from kubernetes import client

from contour_operator.constants import (
    OWNING_CONTOUR_NAME_LABEL,
    OWNING_CONTOUR_NS_LABEL,
)
from contour_operator.models.contour import Contour


def owner_labels(contour: Contour) -> dict[str, str]:
    """
    Create the owning labels for an object managed on behalf of contour.

    Args:
        contour: Owning Contour

    Returns:
        Dictionary of owning labels to add to the object's metadata

    Example:
        >>> labels = owner_labels(contour)
        >>> service.metadata.labels = {**(service.metadata.labels or {}), **labels}
    """
    return {
        OWNING_CONTOUR_NAME_LABEL: contour.name,
        OWNING_CONTOUR_NS_LABEL: contour.namespace,
    }


def get_object_labels(obj: Any) -> Mapping[str, str] | None:
    """
    Extract labels from a Kubernetes object.

    Accepts a raw manifest dict, a kubernetes client model (V1Service, ...)
    or a bare metadata object exposing a ``labels`` attribute.

    Args:
        obj: Object to read labels from (may be None)

    Returns:
        The object's labels, or None if it has none
    """
    if obj is None:
        return None

    if isinstance(obj, Mapping):
        metadata = obj.get("metadata")
        if isinstance(metadata, Mapping):
            return metadata.get("labels")
        return None

    metadata = getattr(obj, "metadata", None)
    if metadata is not None:
        return getattr(metadata, "labels", None)

    return getattr(obj, "labels", None)


def owner_labels_exist(obj: Any, contour: Contour) -> bool:
    """
    Check whether an object carries both owning labels of contour.

    A single matching label is not enough: the name and namespace labels must
    both match, otherwise the object may belong to a same-named Contour in a
    different namespace.

    Args:
        obj: Labels mapping, or an object to extract labels from
            (see get_object_labels). None and empty labels are not owned.
        contour: Candidate owning Contour

    Returns:
        True if the object is owned by contour
    """
    if obj is None:
        return False

    labels = obj if _is_labels_mapping(obj) else get_object_labels(obj)
    if not labels:
        return False

    return (
        labels.get(OWNING_CONTOUR_NAME_LABEL) == contour.name
        and labels.get(OWNING_CONTOUR_NS_LABEL) == contour.namespace
    )


def _is_labels_mapping(obj: Any) -> bool:
    # Label values are strings, so only a manifest maps "metadata" to a mapping.
    return isinstance(obj, Mapping) and not isinstance(obj.get("metadata"), Mapping)


def owning_selector(contour: Contour) -> client.V1LabelSelector:
    """
    Build a label selector matching every object owned by contour.

    Args:
        contour: Owning Contour

    Returns:
        Label selector on the owning name and namespace labels
    """
    return client.V1LabelSelector(match_labels=owner_labels(contour))


def owning_label_selector(contour: Contour) -> str:
    """
    Render the owning selector in the string form used by list calls.

    Example:
        >>> core_api.list_namespaced_service(
        ...     namespace, label_selector=owning_label_selector(contour)
        ... )
    """
    return ",".join(f"{key}={value}" for key, value in owner_labels(contour).items())
