"""Codeception command emitters."""
