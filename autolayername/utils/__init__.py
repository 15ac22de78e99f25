"""Shared utilities: logging helpers and application paths."""
