"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) for what travels over the wire.
- The domain knows nothing about HTTP or the CLI.
"""
