"""Adapters: HTTP transport, JSON codec and error translation."""
