"""
Node construction for the graph store.

The store never instantiates node classes itself; it asks a NodeFactory.
ClassRegistry is the default factory: it maps a lookup key derived from the
wire type name to a ResourceNode subclass and falls back to ResourceNode.

The function that turns a type name into a lookup key is injected, so hosts
can follow whatever naming convention their model classes use.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping

from .models import ResourceNode

LOG = logging.getLogger("graph.factory")

LookupKeyFn = Callable[[str], str]

_WORD_START_RE = re.compile(r"(\b|_)\w")


def camel_case(type_name: str) -> str:
    """
    Map a wire type name to a class-style key.

    ``blog_posts`` -> ``BlogPosts``, ``PEOPLE`` -> ``People``,
    ``blog-posts`` -> ``Blog-Posts``.
    """
    return _WORD_START_RE.sub(lambda m: m.group(0).upper().replace("_", "", 1), (type_name or "").lower())


def exact(type_name: str) -> str:
    """Use the wire type name unchanged as the lookup key."""
    return type_name


LOOKUP_KEY_FUNCTIONS: dict[str, LookupKeyFn] = {
    "camel": camel_case,
    "exact": exact,
}


def lookup_key_function(style: str) -> LookupKeyFn:
    """
    Return the lookup-key function registered under ``style``.

    Raises:
        ValueError: Unknown style
    """
    try:
        return LOOKUP_KEY_FUNCTIONS[style]
    except KeyError:
        supported = ", ".join(repr(s) for s in LOOKUP_KEY_FUNCTIONS)
        raise ValueError(f"Unknown lookup key style: {style!r}. Supported: {supported}") from None


class NodeFactory(ABC):
    """Creates the node instance for a (type, id) pair."""

    @abstractmethod
    def create(self, type: str, id: str | None) -> ResourceNode:
        """Construct a fresh, empty node."""


class ClassRegistry(NodeFactory):
    """
    Registry of specialized node classes keyed by lookup key.

    Usage:
        registry = ClassRegistry()

        @registry.register("blog_posts")
        class BlogPost(ResourceNode):
            ...

        registry.create("blog_posts", "1")   # -> BlogPost
        registry.create("comments", "7")     # -> ResourceNode
    """

    def __init__(
        self,
        classes: Mapping[str, type[ResourceNode]] | None = None,
        to_lookup_key: LookupKeyFn = camel_case,
    ) -> None:
        """
        Args:
            classes: Initial mapping, keyed by lookup key (already normalized)
            to_lookup_key: Maps a wire type name to a lookup key
        """
        self._to_lookup_key = to_lookup_key
        self._classes: dict[str, type[ResourceNode]] = {}
        for key, cls in (classes or {}).items():
            self._add(key, cls)

    def _add(self, key: str, cls: type[ResourceNode]) -> None:
        if not (isinstance(cls, type) and issubclass(cls, ResourceNode)):
            raise TypeError(f"Node class for {key!r} must subclass ResourceNode, got {cls!r}")
        self._classes[key] = cls

    def register(self, type_name: str, cls: type[ResourceNode] | None = None):
        """
        Register ``cls`` for a wire type name. Works as a decorator when
        ``cls`` is omitted.
        """
        key = self._to_lookup_key(type_name)

        def decorator(node_cls: type[ResourceNode]) -> type[ResourceNode]:
            self._add(key, node_cls)
            LOG.debug("Registered %s for type %r (key %r)", node_cls.__name__, type_name, key)
            return node_cls

        if cls is not None:
            return decorator(cls)
        return decorator

    def resolve(self, type: str) -> type[ResourceNode] | None:
        """Specialized class for ``type``, or None if none is registered."""
        return self._classes.get(self._to_lookup_key(type))

    def create(self, type: str, id: str | None) -> ResourceNode:
        cls = self.resolve(type) or ResourceNode
        return cls(type, id)

    def __contains__(self, type_name: str) -> bool:
        return self.resolve(type_name) is not None
