"""
Observability utilities for the Contour operator.

This module provides structured logging with correlation IDs for
production troubleshooting.
"""

from .logging import OperatorLogger, configure_logging, setup_structured_logging

__all__ = [
    "OperatorLogger",
    "configure_logging",
    "setup_structured_logging",
]
