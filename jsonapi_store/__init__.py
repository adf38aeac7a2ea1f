"""
jsonapi-store: normalize JSON:API documents into a live object graph.

    from jsonapi_store import GraphStore

    store = GraphStore()
    article = store.sync(payload)
    article.author.name
    article.serialize(attributes=["title"])
"""

from jsonapi_store.config import StoreConfig
from jsonapi_store.graph import ClassRegistry, NodeEvent, NodeFactory, ResourceNode, camel_case
from jsonapi_store.storage import (
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
    "ResourceNode",
    "NodeEvent",
    "NodeFactory",
    "ClassRegistry",
    "camel_case",
    "StoreConfig",
    "DataStoreError",
    "MalformedDocumentError",
    "ModelNotFoundError",
]
