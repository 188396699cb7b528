"""Infrastructure layer: adapters for storage."""
