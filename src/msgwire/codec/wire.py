"""Varint and tag level reading and writing.

This module provides the low-level primitives of the tag-delimited wire format:
base-128 varints, ``field_number << 3 | wire_type`` tags and length-delimited
payloads. It knows nothing about any particular message.
"""

from __future__ import annotations

import enum

from ..exceptions import MalformedInput

# Varints encode at most 64 bits, which takes 10 groups of 7 bits.
MAX_VARINT_BYTES = 10

MAX_FIELD_NUMBER = (1 << 29) - 1


class WireType(enum.IntEnum):
    """Wire types carried in the low 3 bits of a tag."""

    VARINT = 0
    FIXED64 = 1
    LENGTH_DELIMITED = 2
    START_GROUP = 3
    END_GROUP = 4
    FIXED32 = 5


def make_tag(field_number: int, wire_type: WireType) -> int:
    """Combine a field number and wire type into a tag value.

    Raises:
        ValueError: If field_number is outside 1..2**29-1
    """
    if field_number < 1 or field_number > MAX_FIELD_NUMBER:
        raise ValueError(f"field number must be 1-{MAX_FIELD_NUMBER}, got {field_number}")
    return (field_number << 3) | int(wire_type)


def split_tag(tag: int) -> tuple[int, int]:
    """Split a tag value into ``(field_number, wire_type)``."""
    return tag >> 3, tag & 0x07


def varint_size(value: int) -> int:
    """Return the number of bytes needed to encode value as a varint."""
    if value < 0:
        raise ValueError(f"varint_size requires non-negative value, got {value}")
    size = 1
    while value > 0x7F:
        value >>= 7
        size += 1
    return size


class WireWriter:
    """Appends wire-format primitives to a byte buffer.

    Example:
        >>> writer = WireWriter()
        >>> writer.write_string(6, "Hi")
        >>> writer.to_bytes()
        b'2\\x02Hi'
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_varint(self, value: int) -> None:
        """Write an unsigned integer as a little-endian base-128 varint.

        Raises:
            ValueError: If value is negative or wider than 64 bits
        """
        if value < 0:
            raise ValueError(f"write_varint requires non-negative value, got {value}")
        if value >> 64:
            raise ValueError(f"Value {value} does not fit in 64 bits")

        while value > 0x7F:
            self._buffer.append((value & 0x7F) | 0x80)
            value >>= 7
        self._buffer.append(value)

    def write_tag(self, field_number: int, wire_type: WireType) -> None:
        """Write the tag that starts an entry."""
        self.write_varint(make_tag(field_number, wire_type))

    def write_length_delimited(self, field_number: int, payload: bytes) -> None:
        """Write a complete length-delimited entry."""
        self.write_tag(field_number, WireType.LENGTH_DELIMITED)
        self.write_varint(len(payload))
        self._buffer.extend(payload)

    def write_string(self, field_number: int, value: str) -> None:
        """Write a text entry as UTF-8."""
        self.write_length_delimited(field_number, value.encode("utf-8"))

    def write_raw(self, data: bytes) -> None:
        """Append already encoded bytes unchanged."""
        self._buffer.extend(data)

    def __len__(self) -> int:
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return the bytes written so far."""
        return bytes(self._buffer)


class WireReader:
    """Reads wire-format primitives from a byte buffer.

    Every read either consumes a complete primitive or raises
    :class:`MalformedInput`; the position is undefined after a failure.

    Example:
        >>> reader = WireReader(b"2\\x02Hi")
        >>> reader.read_tag()
        (6, 2)
        >>> reader.read_string()
        'Hi'
    """

    def __init__(self, data: bytes) -> None:
        self._data = memoryview(bytes(data))
        self._position = 0

    def at_end(self) -> bool:
        """Return True once every byte has been consumed."""
        return self._position >= len(self._data)

    def position(self) -> int:
        """Return the current byte offset."""
        return self._position

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def span(self, start: int) -> bytes:
        """Return the raw bytes between start and the current position."""
        return bytes(self._data[start : self._position])

    def read_varint(self) -> int:
        """Read a little-endian base-128 varint.

        Raises:
            MalformedInput: If the varint is truncated or longer than 10 bytes
        """
        start = self._position
        result = 0
        shift = 0
        for _ in range(MAX_VARINT_BYTES):
            if self._position >= len(self._data):
                raise MalformedInput("Truncated varint", offset=start)
            byte = self._data[self._position]
            self._position += 1
            result |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return result
            shift += 7
        raise MalformedInput("Varint longer than 10 bytes", offset=start)

    def read_tag(self) -> tuple[int, int]:
        """Read a tag and return ``(field_number, wire_type)``.

        Raises:
            MalformedInput: If the tag is truncated or names field number 0
        """
        start = self._position
        field_number, wire_type = split_tag(self.read_varint())
        if field_number == 0:
            raise MalformedInput("Invalid field number 0", offset=start)
        return field_number, wire_type

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read exactly num_bytes raw bytes.

        Raises:
            MalformedInput: If fewer than num_bytes remain
        """
        if num_bytes > self.bytes_remaining():
            raise MalformedInput(
                f"Need {num_bytes} bytes, have {self.bytes_remaining()}",
                offset=self._position,
            )
        chunk = bytes(self._data[self._position : self._position + num_bytes])
        self._position += num_bytes
        return chunk

    def read_length_delimited(self) -> bytes:
        """Read a varint length followed by that many bytes."""
        length = self.read_varint()
        return self.read_bytes(length)

    def read_string(self) -> str:
        """Read a length-delimited payload as UTF-8 text.

        Raises:
            MalformedInput: If the payload is truncated or not valid UTF-8
        """
        start = self._position
        payload = self.read_length_delimited()
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedInput(f"Invalid UTF-8 text: {e}", offset=start) from e

    def skip_field(self, field_number: int, wire_type: int) -> None:
        """Skip the payload of an entry whose tag has just been read.

        Args:
            field_number: Field number from the tag (used to match groups)
            wire_type: Wire type from the tag

        Raises:
            MalformedInput: If the payload is truncated, the wire type is
                unknown, or a group is not closed
        """
        if wire_type == WireType.VARINT:
            self.read_varint()
        elif wire_type == WireType.FIXED64:
            self.read_bytes(8)
        elif wire_type == WireType.LENGTH_DELIMITED:
            self.read_length_delimited()
        elif wire_type == WireType.FIXED32:
            self.read_bytes(4)
        elif wire_type == WireType.START_GROUP:
            self._skip_group(field_number)
        elif wire_type == WireType.END_GROUP:
            raise MalformedInput(
                f"Unexpected end of group for field {field_number}", offset=self._position
            )
        else:
            raise MalformedInput(f"Unknown wire type {wire_type}", offset=self._position)

    def _skip_group(self, field_number: int) -> None:
        """Skip nested entries up to the END_GROUP matching field_number."""
        start = self._position
        while True:
            if self.at_end():
                raise MalformedInput(f"Unterminated group for field {field_number}", offset=start)
            inner_number, inner_type = self.read_tag()
            if inner_type == WireType.END_GROUP:
                if inner_number != field_number:
                    raise MalformedInput(
                        f"Group for field {field_number} closed by field {inner_number}",
                        offset=self._position,
                    )
                return
            self.skip_field(inner_number, inner_type)
