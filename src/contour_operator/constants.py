"""
Constants used throughout the Contour operator.

This module defines all constant values used by the operator including:
- Custom resource coordinates
- Owning labels for child objects
- Default configuration values
- Error message templates
"""

import logging
import os

# Contour custom resource coordinates
CONTOUR_API_GROUP = "operator.projectcontour.io"
CONTOUR_API_VERSION = "v1alpha1"
CONTOUR_PLURAL = "contours"
CONTOUR_KIND = "Contour"

# Owning labels stamped on every object managed on behalf of a Contour.
# These are the compatibility contract with every other component that claims
# or checks ownership, so they must never change.
OWNING_CONTOUR_NAME_LABEL = "contour.operator.projectcontour.io/owning-contour-name"
OWNING_CONTOUR_NS_LABEL = "contour.operator.projectcontour.io/owning-contour-namespace"

# Envoy container ports
ENVOY_HTTP_PORT_NAME = "http"
ENVOY_HTTPS_PORT_NAME = "https"
DEFAULT_ENVOY_HTTP_PORT = 8080
DEFAULT_ENVOY_HTTPS_PORT = 8443

# Spec defaults
DEFAULT_SPEC_NAMESPACE = "projectcontour"
DEFAULT_CONTOUR_REPLICAS = 2

# Network publishing types for Envoy
NETWORK_TYPE_LOAD_BALANCER = "LoadBalancerService"
NETWORK_TYPE_NODE_PORT = "NodePortService"
NETWORK_TYPE_CLUSTER_IP = "ClusterIPService"

# Log level for handler entry logs
HANDLER_ENTRY_LOG_LEVEL = getattr(
    logging, os.getenv("HANDLER_ENTRY_LOG_LEVEL", "INFO").upper(), logging.INFO
)

# Error message templates
ERROR_LIST_CONTOURS = "failed to list contours: {}"
ERROR_INVALID_STORED_CONTOUR = "stored contour does not match the schema: {}"
ERROR_SPEC_NS_CONFLICT = "other contours exist in namespace '{}'"
ERROR_DUPLICATE_PORT_NAME = "duplicate container port name '{}'"
ERROR_DUPLICATE_PORT_NUMBER = "duplicate container port number {}"
ERROR_MISSING_PORT_NAMES = "container ports must include names 'http' and 'https'"
