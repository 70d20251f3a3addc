"""Infrastructure layer - concrete department sources."""
