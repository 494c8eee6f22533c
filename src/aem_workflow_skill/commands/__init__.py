"""Per-invocation CLI context."""
