"""Infrastructure layer: adapters for persistence, AI backends and rate limiting."""
