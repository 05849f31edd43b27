"""Logging and small helpers."""
