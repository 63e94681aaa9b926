"""
Admission webhooks for the Contour operator.

This module provides a validating admission webhook for Contour custom
resources. The webhook rejects Contours whose spec namespace is already
governed by another Contour, giving immediate feedback instead of a
conflict discovered during reconciliation.

Webhooks are served by Kopf's built-in HTTPS server.
"""
