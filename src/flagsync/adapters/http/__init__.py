"""HTTP adapter – async httpx client wrapper."""
from flagsync.adapters.http.client import HttpClient, HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient"]
