"""Protobuf schema description for message models.

The msgwire wire format is the protobuf wire format, so a message model maps
one-to-one onto a proto ``message`` declaration of string fields.
"""

from __future__ import annotations

from pydantic import BaseModel

from ..codec.schema import MessageSchema


def to_proto_schema(
    message_class: type[BaseModel],
    *,
    package: str = "",
    syntax: str = "proto3",
) -> str:
    """Generate a Protobuf .proto declaration for a message class.

    Fields are listed in tag order under their camelCase names, so a peer
    built from the declaration reads and writes the same bytes as msgwire.

    Args:
        message_class: Message class to describe
        package: Optional Protobuf package name
        syntax: Protobuf syntax version ("proto2" or "proto3")

    Returns:
        .proto schema as a string

    Raises:
        SchemaError: If the message's tag table is invalid
        ValueError: If syntax is not "proto2" or "proto3"

    Example:
        >>> print(to_proto_schema(Message, package="pb"))
        syntax = "proto3";
        package pb;
        <BLANKLINE>
        message Message {
          // Record identifier
          string id = 1;
          // Owning user identifier
          string userId = 2;
        ...
    """
    if syntax not in ("proto2", "proto3"):
        raise ValueError(f"Invalid syntax: {syntax}. Must be 'proto2' or 'proto3'")

    schema = MessageSchema.from_model(message_class)
    # proto2 has no implicit presence, so every field needs a label
    label = "optional " if syntax == "proto2" else ""

    lines = [f'syntax = "{syntax}";']
    if package:
        lines.append(f"package {package};")
    lines.append("")

    lines.append(f"message {message_class.__name__} {{")
    for field in schema.fields:
        description = message_class.model_fields[field.name].description
        if description:
            lines.append(f"  // {description}")
        lines.append(f"  {label}string {field.alias} = {field.tag};")
    lines.append("}")

    return "\n".join(lines)
