"""Infrastructure adapters and configuration."""
