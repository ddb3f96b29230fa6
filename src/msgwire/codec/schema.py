"""Schema introspection for Pydantic models.

This module provides utilities to analyze Pydantic models and extract the
tag table the codec works from: which attribute is carried under which wire
field number, with which wire type, and what its default is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Type

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import SchemaError
from .wire import MAX_FIELD_NUMBER, WireType


@dataclass(frozen=True)
class FieldSchema:
    """Schema information for a single field.

    Attributes:
        name: Attribute name on the model
        alias: External (camelCase) name, same as name when no alias is set
        tag: Wire field number
        wire_type: Wire type the field is written with
        default: Default value; a field equal to it is not written
    """

    name: str
    alias: str
    tag: int
    wire_type: WireType
    default: Any


class MessageSchema:
    """Tag table for a Pydantic message model.

    Fields are ordered by ascending tag, which is the order they are encoded in.
    """

    def __init__(self, model_class: Type[BaseModel]) -> None:
        """Initialize the schema from a Pydantic model.

        Args:
            model_class: Pydantic model class to analyze

        Raises:
            SchemaError: If the model's tag table is invalid
        """
        self.model_class = model_class
        self.fields: List[FieldSchema] = []
        self.by_tag: Dict[int, FieldSchema] = {}
        self._introspect()

    @classmethod
    def from_model(cls, model_class: Type[BaseModel]) -> MessageSchema:
        """Create a schema from a Pydantic model.

        Args:
            model_class: Pydantic model class

        Returns:
            MessageSchema instance
        """
        return cls(model_class)

    def _introspect(self) -> None:
        """Introspect the model and populate field schemas."""
        model_fields = self.model_class.model_fields

        for field_name, field_info in model_fields.items():
            field_schema = self._extract_field_schema(field_name, field_info)
            existing = self.by_tag.get(field_schema.tag)
            if existing is not None:
                raise SchemaError(
                    f"{self.model_class.__name__}: fields {existing.name} and "
                    f"{field_schema.name} share tag {field_schema.tag}"
                )
            self.by_tag[field_schema.tag] = field_schema

        self.fields = sorted(self.by_tag.values(), key=lambda f: f.tag)

    def _extract_field_schema(self, name: str, field_info: FieldInfo) -> FieldSchema:
        """Extract schema information from a Pydantic FieldInfo.

        Args:
            name: Field name
            field_info: Pydantic FieldInfo object

        Returns:
            FieldSchema with extracted information
        """
        if field_info.annotation is not str:
            raise SchemaError(
                f"Field {name}: unsupported type {field_info.annotation}, only str is supported"
            )

        extra = field_info.json_schema_extra
        tag = extra.get("tag") if isinstance(extra, dict) else None
        if tag is None:
            raise SchemaError(f"Field {name}: no wire tag, declare it with TextField(tag=...)")
        if not isinstance(tag, int) or isinstance(tag, bool) or not 1 <= tag <= MAX_FIELD_NUMBER:
            raise SchemaError(f"Field {name}: tag must be an integer 1-{MAX_FIELD_NUMBER}, got {tag!r}")

        return FieldSchema(
            name=name,
            alias=field_info.alias or name,
            tag=tag,
            wire_type=WireType.LENGTH_DELIMITED,
            default=field_info.default,
        )

    def field_for_tag(self, tag: int) -> FieldSchema | None:
        """Return the field carried under tag, or None if the tag is unknown."""
        return self.by_tag.get(tag)
