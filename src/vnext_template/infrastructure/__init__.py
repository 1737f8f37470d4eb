"""Infrastructure layer — filesystem access for domain discovery and loading."""
