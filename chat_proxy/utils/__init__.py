"""Logging and misc helpers."""
