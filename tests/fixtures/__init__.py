"""Test fixtures for Contour resources."""
