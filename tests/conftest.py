"""
Shared test fixtures.

Documents follow the JSON:API examples: articles with an author (people)
and comments, comments with an author.
"""

import pytest

from jsonapi_store.storage.graph_store import GraphStore


@pytest.fixture
def store():
    """Empty GraphStore with the default class registry."""
    return GraphStore()


@pytest.fixture
def compound_document():
    """Article with author and comments, related resources side-loaded."""
    return {
        "data": {
            "type": "articles",
            "id": "1",
            "attributes": {"title": "JSON:API paints my bikeshed!", "tags": ["api", "json"]},
            "relationships": {
                "author": {"data": {"type": "people", "id": "9"}},
                "comments": {
                    "data": [
                        {"type": "comments", "id": "5"},
                        {"type": "comments", "id": "12"},
                    ]
                },
            },
        },
        "included": [
            {
                "type": "people",
                "id": "9",
                "attributes": {"first-name": "Dan", "last-name": "Gebhardt"},
            },
            {
                "type": "comments",
                "id": "5",
                "attributes": {"body": "First!"},
                "relationships": {"author": {"data": {"type": "people", "id": "2"}}},
            },
            {
                "type": "comments",
                "id": "12",
                "attributes": {"body": "I like XML better"},
                "relationships": {"author": {"data": {"type": "people", "id": "9"}}},
            },
        ],
        "meta": {"total-pages": 13},
    }
