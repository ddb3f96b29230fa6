"""Unit tests for varint and tag primitives."""

from __future__ import annotations

import pytest

from msgwire.codec.wire import (
    WireReader,
    WireType,
    WireWriter,
    make_tag,
    split_tag,
    varint_size,
)
from msgwire.exceptions import MalformedInput


class TestWireWriter:
    """Test WireWriter functionality."""

    def test_write_varint_single_byte(self) -> None:
        """Test values below 128 take one byte."""
        writer = WireWriter()
        writer.write_varint(0)
        writer.write_varint(1)
        writer.write_varint(127)

        assert writer.to_bytes() == b"\x00\x01\x7f"

    def test_write_varint_multi_byte(self) -> None:
        """Test little-endian base-128 continuation."""
        writer = WireWriter()
        writer.write_varint(300)

        assert writer.to_bytes() == b"\xac\x02"

    def test_write_varint_max(self) -> None:
        """Test the largest 64-bit value takes ten bytes."""
        writer = WireWriter()
        writer.write_varint(2**64 - 1)

        assert writer.to_bytes() == b"\xff" * 9 + b"\x01"

    def test_write_varint_bounds(self) -> None:
        """Test varint bounds checking."""
        writer = WireWriter()

        with pytest.raises(ValueError, match="negative"):
            writer.write_varint(-1)

        with pytest.raises(ValueError, match="64 bits"):
            writer.write_varint(2**64)

    def test_write_tag(self) -> None:
        """Test tag layout is field_number << 3 | wire_type."""
        writer = WireWriter()
        writer.write_tag(1, WireType.LENGTH_DELIMITED)
        writer.write_tag(16, WireType.VARINT)

        assert writer.to_bytes() == b"\x0a\x80\x01"

    def test_write_string(self) -> None:
        """Test text entries are UTF-8 with a byte length."""
        writer = WireWriter()
        writer.write_string(6, "é")

        assert writer.to_bytes() == b"\x32\x02\xc3\xa9"
        assert len(writer) == 4

    def test_empty(self) -> None:
        """Test empty writer produces no bytes."""
        assert WireWriter().to_bytes() == b""


class TestWireReader:
    """Test WireReader functionality."""

    def test_read_varint(self) -> None:
        """Test reading single and multi byte varints."""
        reader = WireReader(b"\x7f\xac\x02")

        assert reader.read_varint() == 127
        assert reader.read_varint() == 300
        assert reader.at_end()

    def test_read_truncated_varint(self) -> None:
        """Test continuation bit on the last byte fails."""
        reader = WireReader(b"\xac")

        with pytest.raises(MalformedInput, match="Truncated varint"):
            reader.read_varint()

    def test_read_overlong_varint(self) -> None:
        """Test varints longer than ten bytes fail."""
        reader = WireReader(b"\x80" * 10 + b"\x01")

        with pytest.raises(MalformedInput, match="longer than 10 bytes"):
            reader.read_varint()

    def test_read_tag(self) -> None:
        """Test tags split into field number and wire type."""
        reader = WireReader(b"\x32")

        assert reader.read_tag() == (6, WireType.LENGTH_DELIMITED)

    def test_read_tag_field_zero(self) -> None:
        """Test field number 0 is rejected."""
        reader = WireReader(b"\x02")

        with pytest.raises(MalformedInput, match="field number 0"):
            reader.read_tag()

    def test_read_string(self) -> None:
        """Test reading a length-delimited text payload."""
        reader = WireReader(b"\x05hello")

        assert reader.read_string() == "hello"
        assert reader.bytes_remaining() == 0

    def test_read_string_length_past_end(self) -> None:
        """Test declared length larger than the data fails."""
        reader = WireReader(b"\x05hel")

        with pytest.raises(MalformedInput) as exc_info:
            reader.read_string()

        assert exc_info.value.offset == 1

    def test_read_string_invalid_utf8(self) -> None:
        """Test invalid UTF-8 fails."""
        reader = WireReader(b"\x02\xc3\x28")

        with pytest.raises(MalformedInput, match="UTF-8"):
            reader.read_string()

    def test_span(self) -> None:
        """Test raw bytes between two positions."""
        reader = WireReader(b"\x08\x96\x01")
        start = reader.position()
        reader.read_tag()
        reader.read_varint()

        assert reader.span(start) == b"\x08\x96\x01"


class TestSkipField:
    """Test skipping entries by wire type."""

    def test_skip_varint(self) -> None:
        reader = WireReader(b"\x96\x01\xff")
        reader.skip_field(1, WireType.VARINT)

        assert reader.position() == 2

    def test_skip_fixed64(self) -> None:
        reader = WireReader(b"\x00" * 8)
        reader.skip_field(1, WireType.FIXED64)

        assert reader.at_end()

    def test_skip_fixed32(self) -> None:
        reader = WireReader(b"\x00" * 4 + b"\x01")
        reader.skip_field(1, WireType.FIXED32)

        assert reader.bytes_remaining() == 1

    def test_skip_length_delimited(self) -> None:
        reader = WireReader(b"\x03abc")
        reader.skip_field(1, WireType.LENGTH_DELIMITED)

        assert reader.at_end()

    def test_skip_group(self) -> None:
        """Test a group is skipped through its matching end marker."""
        # field 9 start group { field 1 varint 5 } field 9 end group, then 0x01
        reader = WireReader(b"\x08\x05\x4c\x01")
        reader.skip_field(9, WireType.START_GROUP)

        assert reader.bytes_remaining() == 1

    def test_skip_group_mismatched_end(self) -> None:
        reader = WireReader(b"\x54")  # field 10 end group

        with pytest.raises(MalformedInput, match="closed by field 10"):
            reader.skip_field(9, WireType.START_GROUP)

    def test_skip_group_unterminated(self) -> None:
        reader = WireReader(b"\x08\x05")

        with pytest.raises(MalformedInput, match="Unterminated group"):
            reader.skip_field(9, WireType.START_GROUP)

    def test_skip_truncated_fixed(self) -> None:
        reader = WireReader(b"\x00\x00")

        with pytest.raises(MalformedInput):
            reader.skip_field(1, WireType.FIXED32)

    def test_skip_unknown_wire_type(self) -> None:
        reader = WireReader(b"\x00")

        with pytest.raises(MalformedInput, match="Unknown wire type 6"):
            reader.skip_field(1, 6)

    def test_skip_stray_end_group(self) -> None:
        reader = WireReader(b"")

        with pytest.raises(MalformedInput, match="end of group"):
            reader.skip_field(1, WireType.END_GROUP)


class TestTagHelpers:
    """Test tag and size helpers."""

    def test_make_and_split_tag(self) -> None:
        tag = make_tag(8, WireType.LENGTH_DELIMITED)

        assert tag == 0x42
        assert split_tag(tag) == (8, 2)

    def test_make_tag_bounds(self) -> None:
        with pytest.raises(ValueError, match="field number"):
            make_tag(0, WireType.VARINT)

        with pytest.raises(ValueError, match="field number"):
            make_tag(2**29, WireType.VARINT)

    @pytest.mark.parametrize(
        ("value", "size"),
        [(0, 1), (127, 1), (128, 2), (16383, 2), (16384, 3), (2**64 - 1, 10)],
    )
    def test_varint_size(self, value: int, size: int) -> None:
        writer = WireWriter()
        writer.write_varint(value)

        assert varint_size(value) == size == len(writer.to_bytes())
