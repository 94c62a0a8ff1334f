"""Request context and pipeline actions."""
