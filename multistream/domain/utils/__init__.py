"""Domain-specific utilities."""
