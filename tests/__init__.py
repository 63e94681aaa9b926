"""
Tests package - Test suite for the Contour operator.

Contains:
- unit/: Unit tests for individual components
- fixtures/: Test data and sample resources
"""
