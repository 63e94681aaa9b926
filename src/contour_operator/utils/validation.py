"""
Validation for Contour resources.

Checks a Contour against the rules the operator relies on:
- Envoy container ports have unique names and numbers, including http and https
- No other Contour governs the same spec namespace
"""

import logging
from collections.abc import Sequence

from contour_operator.constants import (
    ENVOY_HTTP_PORT_NAME,
    ENVOY_HTTPS_PORT_NAME,
    ERROR_DUPLICATE_PORT_NAME,
    ERROR_DUPLICATE_PORT_NUMBER,
    ERROR_MISSING_PORT_NAMES,
    ERROR_SPEC_NS_CONFLICT,
)
from contour_operator.errors import ValidationError
from contour_operator.models.contour import Contour, ContainerPort
from contour_operator.utils.registry import other_contours_exist_in_spec_ns

logger = logging.getLogger(__name__)

CONTAINER_PORTS_FIELD = "spec.networkPublishing.envoy.containerPorts"
SPEC_NAMESPACE_FIELD = "spec.namespace.name"


def validate_container_ports(ports: Sequence[ContainerPort]) -> None:
    """
    Validate Envoy container ports.

    Args:
        ports: Container ports to validate

    Raises:
        ValidationError: On duplicate names or numbers, or when http or
            https is missing
    """
    names: set[str] = set()
    numbers: set[int] = set()
    for port in ports:
        if port.name in names:
            raise ValidationError(
                ERROR_DUPLICATE_PORT_NAME.format(port.name), field=CONTAINER_PORTS_FIELD
            )
        if port.port_number in numbers:
            raise ValidationError(
                ERROR_DUPLICATE_PORT_NUMBER.format(port.port_number),
                field=CONTAINER_PORTS_FIELD,
            )
        names.add(port.name)
        numbers.add(port.port_number)

    if not {ENVOY_HTTP_PORT_NAME, ENVOY_HTTPS_PORT_NAME} <= names:
        raise ValidationError(ERROR_MISSING_PORT_NAMES, field=CONTAINER_PORTS_FIELD)


def validate_contour(contour: Contour, contours: Sequence[Contour]) -> None:
    """
    Validate a Contour against a snapshot of all Contours.

    Args:
        contour: Contour to validate
        contours: Snapshot of all Contours in the cluster (may include contour)

    Raises:
        ValidationError: If the Contour is invalid or conflicts with another
    """
    validate_container_ports(contour.spec.network_publishing.envoy.container_ports)

    if other_contours_exist_in_spec_ns(contour, contours):
        spec_ns = contour.spec.namespace.name
        logger.warning(
            f"Contour {contour.namespace}/{contour.name} conflicts on spec "
            f"namespace {spec_ns}",
            extra={
                "resource_type": "contour",
                "resource_name": contour.name,
                "namespace": contour.namespace,
                "spec_namespace": spec_ns,
            },
        )
        raise ValidationError(
            ERROR_SPEC_NS_CONFLICT.format(spec_ns),
            field=SPEC_NAMESPACE_FIELD,
            user_action="Choose a spec.namespace.name not governed by another Contour",
        )
