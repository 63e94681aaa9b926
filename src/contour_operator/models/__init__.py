"""
Models package - Pydantic models for type-safe resource handling.

Defines data models for:
- Contour custom resources (spec, status, metadata)
- Contour construction config and the new_contour factory
"""
