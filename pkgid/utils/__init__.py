"""Helpers for working with package descriptor files."""
