"""
Storage layer for jsonapi-store.

Provides:
- GraphStore: in-memory identity map that normalizes JSON:API documents
- build_graph_store: factory configured from StoreConfig
"""

from .graph_store import (
    DataStoreError,
    GraphStore,
    MalformedDocumentError,
    ModelNotFoundError,
    SyncResult,
    build_graph_store,
)

__all__ = [
    "GraphStore",
    "SyncResult",
    "build_graph_store",
    "DataStoreError",
    "MalformedDocumentError",
    "ModelNotFoundError",
]
