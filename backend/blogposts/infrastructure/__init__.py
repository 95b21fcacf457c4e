"""Infrastructure Layer — cross-cutting concerns (logging, request tracing)."""
