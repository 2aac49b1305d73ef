"""Infrastructure adapters: model providers and secret storage."""
