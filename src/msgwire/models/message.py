"""The notification message record.

This module provides the Message class exchanged between services: identifiers,
contact details, subject, body and an optional parent reference for threading.
Every field is text and defaults to the empty string.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, PrivateAttr

from .fields import Text, TextField


class Message(BaseModel):
    """A notification message.

    Fields are plain attributes; reading an unset field returns ``""`` and
    assigning ``""`` makes it unset again for encoding purposes. Both the
    attribute names and the camelCase wire names are accepted as keywords.

    Example:
        >>> msg = Message(id="m1", userId="u1", subject="Hi")
        >>> msg.message = "Hello world"
        >>> data = msg.serialize()
        >>> Message.deserialize(data) == msg
        True

    Options can be configured as ClassVar attributes on a subclass:

    Attributes:
        msgwire_keep_unknown: Keep unrecognised entries seen while decoding and
            write them back out on encode (default False: they are dropped)
    """

    model_config = ConfigDict(
        # Text fields accept str only
        strict=True,
        # Validate on assignment
        validate_assignment=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
        # Accept attribute names as well as camelCase aliases
        populate_by_name=True,
    )

    msgwire_keep_unknown: ClassVar[bool] = False

    id: Text = TextField(tag=1, description="Record identifier")
    user_id: Text = TextField(tag=2, alias="userId", description="Owning user identifier")
    notification_id: Text = TextField(
        tag=3, alias="notificationId", description="Associated notification identifier"
    )
    email: Text = TextField(tag=4, description="Contact email")
    phone: Text = TextField(tag=5, description="Contact phone")
    subject: Text = TextField(tag=6, description="Short title or summary")
    message: Text = TextField(tag=7, description="Body text")
    parent_id: Text = TextField(tag=8, alias="parentId", description="Parent record, for threading")

    _unknown_fields: bytes = PrivateAttr(default=b"")

    @property
    def unknown_fields(self) -> bytes:
        """Raw entries kept from decoding when msgwire_keep_unknown is set.

        Kept entries take part in equality: a message holding them compares
        unequal to one with the same fields and none kept.
        """
        return self._unknown_fields

    def serialize(self) -> bytes:
        """Encode this message to wire format. See :func:`msgwire.codec.encode`."""
        # Import here to avoid circular dependency
        from ..codec.encoder import encode

        return encode(self)

    @classmethod
    def deserialize(cls, data: bytes) -> Message:
        """Decode a message of this class. See :func:`msgwire.codec.decode`."""
        from ..codec.decoder import decode

        return decode(data, cls)

    def to_object(self) -> dict[str, str]:
        """Return all fields as a plain dict keyed by camelCase name."""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_object(cls, obj: dict[str, Any]) -> Message:
        """Build a message from a dict keyed by camelCase or attribute name."""
        return cls.model_validate(obj)
