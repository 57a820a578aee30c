"""Adapters – store backends, HTTP client and the FastAPI integration."""
