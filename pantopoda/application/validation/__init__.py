"""Request validation use case."""
