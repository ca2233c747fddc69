"""Service-level business entities."""
