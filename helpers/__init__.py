"""Helpers for validating raw site configuration data."""
