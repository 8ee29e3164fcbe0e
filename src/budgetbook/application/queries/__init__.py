"""Queries: read-only use cases."""
