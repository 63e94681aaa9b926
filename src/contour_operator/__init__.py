"""
Contour Operator - ownership and uniqueness logic for Contour custom resources.

This package provides:
- Owning label codec and ownership checks for managed child objects
- Label selectors matching every object owned by a Contour
- Uniqueness queries over Contour snapshots (global and per spec namespace)
- Gateway Class reference lookups
- Admission validation for Contour resources
"""

__version__ = "0.1.0"
