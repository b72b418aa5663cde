"""Derived dashboard metrics (statistics + weekly histogram)."""
