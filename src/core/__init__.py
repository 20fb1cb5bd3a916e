"""Core: configuration, domain and services.

Nothing here prints; the CLI owns the terminal.
"""
