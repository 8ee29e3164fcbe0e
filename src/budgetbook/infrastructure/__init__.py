"""Infrastructure adapters: persistence and messaging."""
