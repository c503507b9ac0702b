"""Core query helpers and the exception hierarchy."""
