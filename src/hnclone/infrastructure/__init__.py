"""Infrastructure adapters (remote API access)."""
