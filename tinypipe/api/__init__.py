"""High-level helpers for building pipelines from configuration."""
