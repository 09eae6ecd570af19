"""Shared I/O, schema and logging helpers."""
