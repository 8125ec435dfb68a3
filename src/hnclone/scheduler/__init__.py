"""Background polling jobs."""
