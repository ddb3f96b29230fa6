"""Field helpers for declaring tagged text fields."""

from __future__ import annotations

from typing import Annotated, Any, cast

from pydantic import AfterValidator, Field
from pydantic.fields import FieldInfo


def _check_utf8(value: str) -> str:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError(f"text is not encodable as UTF-8: {e}") from e
    return value


# Text that can always be written to the wire, e.g. no lone surrogates
Text = Annotated[str, AfterValidator(_check_utf8)]


def TextField(*, tag: int, **kwargs: Any) -> FieldInfo:
    """Create a text field carried under the given wire tag.

    This is a convenience wrapper around Pydantic's Field() that defaults the
    value to empty text and records the wire tag as extra metadata for the codec.
    Annotate the field as :data:`Text` so values are checked to be encodable.

    Args:
        tag: Wire field number (1..2**29-1), stable across releases
        **kwargs: Additional Field() arguments (alias, description, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Note(BaseModel):
        ...     subject: Text = TextField(tag=1)
        ...     body: Text = TextField(tag=2)
    """
    kwargs.setdefault("default", "")
    return cast(FieldInfo, Field(json_schema_extra={"tag": tag}, **kwargs))
