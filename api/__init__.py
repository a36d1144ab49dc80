"""HTTP layer for the patent term calculator."""
