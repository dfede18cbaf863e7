"""Application setup (dependency injection)."""
