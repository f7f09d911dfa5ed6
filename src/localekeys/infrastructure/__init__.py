"""Infrastructure layer: runtime introspection and module filters."""
