"""Services of the core (request builders)."""
