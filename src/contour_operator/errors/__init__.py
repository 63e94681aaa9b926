"""
Error handling module for the Contour operator.

This module provides an error hierarchy that integrates with kopf
and provides clear categorization for different types of failures.
"""

from .operator_errors import (
    ConfigurationError,
    ExternalServiceError,
    KubernetesAPIError,
    OperatorError,
    PermanentError,
    ValidationError,
)

__all__ = [
    "OperatorError",
    "ValidationError",
    "PermanentError",
    "ExternalServiceError",
    "KubernetesAPIError",
    "ConfigurationError",
]
