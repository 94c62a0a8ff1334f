"""ASGI host layer: delivers pipeline actions as HTTP responses."""
