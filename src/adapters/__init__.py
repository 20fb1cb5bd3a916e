"""Adapters: HTTP access and avatar renderers (pure I/O)."""
