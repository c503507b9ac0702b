"""HTTP API for browsing the Member/Team queries."""
