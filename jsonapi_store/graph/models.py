"""
Resource node: one identified JSON:API resource in the object graph.

A node owns its attribute and relationship values and remembers the order
in which each name was first set. Relationship values hold other nodes by
reference (None, a single node, or a list of nodes), so the graph may
contain cycles.
"""

from __future__ import annotations

from typing import Any

from .events import NodeEvent, Observable

_MISSING = object()


class ResourceNode(Observable):
    """
    A live, mutable resource identified by (type, id).

    Nodes tracked by a GraphStore must be created through the store
    (GraphStore.init_model) so that identity stays unique.

    Field values are readable as ``node.title`` or ``node["title"]``.
    """

    def __init__(self, type: str, id: str | None = None) -> None:
        super().__init__()
        self._type = type
        self.id = id
        self._attributes: list[str] = []
        self._relationships: list[str] = []
        self._fields: dict[str, Any] = {}
        self.is_placeholder = False

    @property
    def type(self) -> str:
        """Resource type. Fixed at construction."""
        return self._type

    @property
    def attributes(self) -> list[str]:
        """Attribute names in first-set order."""
        return list(self._attributes)

    @property
    def relationships(self) -> list[str]:
        """Relationship names in first-set order."""
        return list(self._relationships)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__} {self._type}/{self.id} has no field {name!r}") from None

    def __getitem__(self, name: str) -> Any:
        return self._fields[name]

    def __contains__(self, name: str) -> bool:
        return name in self._fields

    def get(self, name: str, default: Any = None) -> Any:
        """Return a field value, or ``default`` if it was never set."""
        return self._fields.get(name, default)

    def __repr__(self) -> str:
        marker = " placeholder" if self.is_placeholder else ""
        return f"<{type(self).__name__} {self._type}/{self.id}{marker}>"

    def set_attribute(self, name: str, value: Any) -> None:
        """
        Set (or add) an attribute and notify its observers.

        The first write of a name fixes its position in ``attributes``;
        later writes only replace the value.
        """
        if name not in self._attributes:
            self._attributes.append(name)
        self._fields[name] = value
        self.notify(NodeEvent.ATTRIBUTE_UPDATED, value, name=name)

    def set_relationship(self, name: str, value: ResourceNode | list[ResourceNode] | None) -> None:
        """Set (or add) a relationship to None, one node, or a list of nodes."""
        if name not in self._relationships:
            self._relationships.append(name)
        self._fields[name] = value
        self.notify(NodeEvent.RELATIONSHIP_UPDATED, value, name=name)

    def identifier(self) -> dict[str, Any]:
        """Resource identifier object: ``{"type": ..., "id": ...}``."""
        return {"type": self._type, "id": self.id}

    def serialize(
        self,
        attributes: list[str] | None = None,
        relationships: list[str] | None = None,
    ) -> dict[str, Any]:
        """
        Serialize this node into a JSON:API document.

        Args:
            attributes: Attribute names to include (None = all attributes)
            relationships: Relationship names to include (None = all relationships)

        Returns:
            ``{"data": {"type", "id"?, "attributes"?, "relationships"?}}``.
            Related nodes are written as identifiers only.
        """
        if attributes is None:
            attributes = self._attributes
        if relationships is None:
            relationships = self._relationships

        data: dict[str, Any] = {"type": self._type}
        if self.id is not None:
            data["id"] = self.id

        if attributes:
            data["attributes"] = {key: self._fields.get(key) for key in attributes}

        if relationships:
            rels: dict[str, Any] = {}
            for key in relationships:
                value = self._fields.get(key, _MISSING)
                if value is None or value is _MISSING:
                    rels[key] = {"data": None}
                elif isinstance(value, (list, tuple)):
                    rels[key] = {"data": [model.identifier() for model in value]}
                else:
                    rels[key] = {"data": value.identifier()}
            data["relationships"] = rels

        return {"data": data}

    def destroy(self) -> None:
        """Emit DESTROYED, then detach every observer. Field values are kept."""
        self.notify(NodeEvent.DESTROYED)
        self.remove_all_observers()
        return None
