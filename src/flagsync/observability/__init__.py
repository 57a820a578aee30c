"""Observability – structured logging, correlation context, health checks."""
