"""Jurisdiction checks for field survey locations against administrative boundaries."""
