"""
In-memory JSON:API graph store.

Normalizes JSON:API documents into one ResourceNode per (type, id):
- included resources are synced before primary data
- relationship targets resolve through the same identity map
- targets not seen yet become placeholder nodes that are promoted in place
  once their own resource object is synced

Relationships are followed one hop only, so cyclic graphs are safe.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from jsonapi_store.config.settings import StoreConfig
from jsonapi_store.graph.factory import ClassRegistry, NodeFactory, lookup_key_function
from jsonapi_store.graph.models import ResourceNode
from jsonapi_store.models import Document, ResourceIdentifier, ResourceObject

LOG = logging.getLogger("storage.graph_store")


class DataStoreError(Exception):
    """Base exception for graph store errors."""

    pass


class MalformedDocumentError(DataStoreError):
    """Payload cannot be read as a JSON:API document."""

    pass


class ModelNotFoundError(DataStoreError):
    """Node is not held by the store under its (type, id)."""

    pass


@dataclass
class SyncResult:
    """Primary node(s) of a synced document plus its top-level meta."""

    data: ResourceNode | list[ResourceNode] | None = None
    meta: Any = None


class GraphStore:
    """
    Identity map of ResourceNodes keyed by type, then id.

    Every tracked node is created through init_model, which guarantees a
    single instance per (type, id) for as long as that pair is indexed.
    """

    def __init__(self, factory: NodeFactory | None = None) -> None:
        self.factory = factory if factory is not None else ClassRegistry()
        self._graph: dict[str, dict[str | None, ResourceNode]] = {}

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._graph.values())

    def __contains__(self, key: tuple[str, str | None]) -> bool:
        type, id = key
        return self.find(type, id) is not None

    def types(self) -> list[str]:
        """Types that currently have an index bucket."""
        return list(self._graph)

    # ─────────────────────────────────────────────────────────────────
    # Identity map
    # ─────────────────────────────────────────────────────────────────

    def init_model(self, type: str, id: str | None) -> ResourceNode:
        """Return the node for (type, id), creating an empty one if needed."""
        bucket = self._graph.setdefault(type, {})
        model = bucket.get(id)
        if model is None:
            model = self.factory.create(type, id)
            bucket[id] = model
            LOG.debug("Created %s %s/%s", model.__class__.__name__, type, id)
        return model

    def find(self, type: str, id: str | None) -> ResourceNode | None:
        """Node for (type, id), or None if the store does not hold it."""
        bucket = self._graph.get(type)
        if bucket is None:
            return None
        return bucket.get(id)

    def find_all(self, type: str) -> list[ResourceNode]:
        """Every indexed node of ``type``; empty if the type is unknown."""
        return list(self._graph.get(type, {}).values())

    def destroy(self, model: ResourceNode) -> None:
        """
        Destroy a node and drop it from the index.

        Other nodes that reference ``model`` keep their references.

        Raises:
            ModelNotFoundError: ``model`` is not the node indexed under its (type, id)
        """
        if self.find(model.type, model.id) is not model:
            raise ModelNotFoundError(f"{model.type}/{model.id} is not held by this store")
        model.destroy()
        del self._graph[model.type][model.id]
        LOG.debug("Destroyed %s/%s", model.type, model.id)

    def reset(self) -> None:
        """Forget every node. Nodes are not destroyed and keep their observers."""
        self._graph = {}
        LOG.debug("Store reset")

    # ─────────────────────────────────────────────────────────────────
    # Normalization
    # ─────────────────────────────────────────────────────────────────

    def find_or_init(self, identifier: ResourceIdentifier | Mapping[str, Any]) -> ResourceNode:
        """
        Resolve a relationship target, creating a placeholder if unseen.

        Only a node created here is flagged as placeholder; an existing node
        is returned untouched.
        """
        if not isinstance(identifier, ResourceIdentifier):
            identifier = _parse(ResourceIdentifier, identifier)
        model = self.find(identifier.type, identifier.id)
        if model is None:
            model = self.init_model(identifier.type, identifier.id)
            model.is_placeholder = True
            LOG.debug("Placeholder for %s/%s", identifier.type, identifier.id)
        return model

    def sync_record(self, resource: ResourceObject | Mapping[str, Any]) -> ResourceNode:
        """
        Merge one resource object into the graph.

        Args:
            resource: Resource object (model or raw mapping)

        Returns:
            The node for the resource's (type, id)
        """
        if not isinstance(resource, ResourceObject):
            resource = _parse(ResourceObject, resource)

        model = self.init_model(resource.type, resource.id)
        if model.is_placeholder:
            LOG.debug("Promoting placeholder %s/%s", resource.type, resource.id)
        model.is_placeholder = False

        for key, value in (resource.attributes or {}).items():
            model.set_attribute(key, value)

        for key, rel in (resource.relationships or {}).items():
            if rel.has_data:
                if rel.data is None:
                    model.set_relationship(key, None)
                elif isinstance(rel.data, list):
                    model.set_relationship(key, [self.find_or_init(item) for item in rel.data])
                else:
                    model.set_relationship(key, self.find_or_init(rel.data))
            elif rel.links is not None:
                LOG.warning(
                    "Relationship %r of %s/%s has links but no data; links are not supported, skipping",
                    key,
                    resource.type,
                    resource.id,
                )

        return model

    def sync_with_meta(self, payload: Document | Mapping[str, Any]) -> SyncResult:
        """
        Sync a JSON:API document and return its primary node(s) and meta.

        Returns an empty SyncResult when the document has no primary data.
        """
        document = payload if isinstance(payload, Document) else _parse(Document, payload)
        primary = document.data
        if primary is None:
            return SyncResult()

        for resource in document.included or []:
            self.sync_record(resource)

        if isinstance(primary, list):
            data: ResourceNode | list[ResourceNode] = [self.sync_record(resource) for resource in primary]
        else:
            data = self.sync_record(primary)

        LOG.debug(
            "Synced document: %d included, %s primary",
            len(document.included or []),
            len(data) if isinstance(data, list) else 1,
        )
        return SyncResult(data=data, meta=document.meta)

    def sync(self, payload: Document | Mapping[str, Any]) -> Any:
        """
        Sync a JSON:API document and return its primary node(s).

        Error documents are returned as ``{"errors": [...]}`` without
        touching the store.
        """
        if isinstance(payload, Mapping) and payload.get("errors") is not None:
            return {"errors": payload["errors"]}
        document = payload if isinstance(payload, Document) else _parse(Document, payload)
        if document.is_error:
            return {"errors": document.errors}
        return self.sync_with_meta(document).data


def _parse(model_cls, payload):
    try:
        return model_cls.model_validate(payload)
    except ValidationError as e:
        raise MalformedDocumentError(f"Invalid {model_cls.__name__}: {e}") from e


def build_graph_store(
    config: StoreConfig | None = None,
    classes: Mapping[str, type[ResourceNode]] | None = None,
) -> GraphStore:
    """
    Factory: create a GraphStore configured from ``config``.

    Args:
        config: Store configuration (defaults to StoreConfig.from_env())
        classes: Specialized node classes keyed by lookup key

    Raises:
        ValueError: Unknown lookup key style
    """
    config = config or StoreConfig.from_env()
    registry = ClassRegistry(classes, to_lookup_key=lookup_key_function(config.lookup_key))
    return GraphStore(registry)
