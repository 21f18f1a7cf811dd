"""Endpoint functions referenced from declarative route tables."""
