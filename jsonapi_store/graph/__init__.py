"""
Object graph model for jsonapi-store.

Usage:
    from jsonapi_store.graph import ClassRegistry, NodeEvent, ResourceNode

    registry = ClassRegistry()

    @registry.register("blog_posts")
    class BlogPost(ResourceNode):
        @property
        def headline(self):
            return self.get("title", "").upper()

    post = registry.create("blog_posts", "1")
    post.subscribe(NodeEvent.ATTRIBUTE_UPDATED, print, name="title")
    post.set_attribute("title", "Hello")   # prints "Hello"
"""

from .events import NodeEvent, Observable
from .factory import (
    ClassRegistry,
    NodeFactory,
    camel_case,
    exact,
    lookup_key_function,
)
from .models import ResourceNode

__all__ = [
    # Models
    "ResourceNode",
    "NodeEvent",
    "Observable",
    # Factories
    "NodeFactory",
    "ClassRegistry",
    "camel_case",
    "exact",
    "lookup_key_function",
]
