"""Application layer: query use cases."""
