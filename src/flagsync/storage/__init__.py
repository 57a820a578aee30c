"""Storage – canonical codec, key-value store port, typed document access."""
from flagsync.storage.codec import Codec, decode, encode
from flagsync.storage.documents import DocumentStore
from flagsync.storage.store import InMemoryKeyValueStore, KeyValueStore

__all__ = [
    "Codec",
    "DocumentStore",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "decode",
    "encode",
]
