"""Shared helpers that are not part of the numeric core."""
