"""Utility helpers for pathwalk."""
