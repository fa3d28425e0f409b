"""Boundary layer: adapters for the database and the embedding provider."""
