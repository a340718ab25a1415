"""Core: configuration, domain models, builders and exceptions.

Why:
- Nothing here performs I/O; adapters depend on the core, never the reverse.
"""
