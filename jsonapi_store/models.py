from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict

_WIRE_CONFIG = ConfigDict(extra="allow", coerce_numbers_to_str=True)


class ResourceIdentifier(BaseModel):
    model_config = _WIRE_CONFIG

    type: str
    id: str


class RelationshipObject(BaseModel):
    model_config = _WIRE_CONFIG

    data: Union[List[ResourceIdentifier], ResourceIdentifier, None] = None
    links: Optional[Any] = None
    meta: Optional[Any] = None

    @property
    def has_data(self) -> bool:
        """True when the member was present in the payload, even as null."""
        return "data" in self.model_fields_set


class ResourceObject(BaseModel):
    model_config = _WIRE_CONFIG

    type: str
    id: Optional[str] = None
    attributes: Optional[dict[str, Any]] = None
    relationships: Optional[dict[str, RelationshipObject]] = None
    links: Optional[Any] = None
    meta: Optional[Any] = None


class Document(BaseModel):
    model_config = _WIRE_CONFIG

    data: Union[List[ResourceObject], ResourceObject, None] = None
    included: Optional[List[ResourceObject]] = None
    meta: Optional[Any] = None
    errors: Optional[List[Any]] = None
    links: Optional[Any] = None
    jsonapi: Optional[Any] = None

    @property
    def is_error(self) -> bool:
        return self.errors is not None
