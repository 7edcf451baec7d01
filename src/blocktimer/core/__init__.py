"""Timing primitives and reporting units."""
