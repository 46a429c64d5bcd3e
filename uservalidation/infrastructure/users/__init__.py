"""Infrastructure adapters for the users bounded context."""
