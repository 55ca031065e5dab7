"""Core pipeline, result types and logging."""
