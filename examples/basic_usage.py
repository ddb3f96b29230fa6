#!/usr/bin/env python3
"""Basic usage example for msgwire.

This example demonstrates:
1. Building a notification message
2. Per-field encoded sizes
3. Encoding to the binary wire format
4. Decoding back to a Message
5. Reading a message from a newer producer
6. Comparing the size to JSON
"""

from __future__ import annotations

from msgwire import Message, WireWriter, decode, encode, field_sizes


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("msgwire Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Creating a message...")
    msg = Message(id="m1", userId="u1", subject="Hi")
    msg.message = "Hello world"
    for name, value in msg.to_object().items():
        print(f"   {name}: {value!r}")
    print()

    print("2. Field sizes (unset fields cost nothing)...")
    for field_name, size in field_sizes(msg).items():
        print(f"   {field_name}: {size} bytes")
    print()

    print("3. Encoding...")
    data = encode(msg)
    print(f"   Encoded size: {len(data)} bytes")
    print(f"   Hex: {data.hex()}")
    print()

    print("4. Decoding...")
    decoded = decode(data)
    print(f"   Round-trip {'successful' if decoded == msg else 'FAILED'}")
    print()

    print("5. Decoding data with a field this version does not know...")
    writer = WireWriter()
    writer.write_string(12, "added by a newer producer")
    newer = decode(data + writer.to_bytes())
    print(f"   Unknown field skipped, subject still {newer.subject!r}")
    print()

    print("6. Comparing to JSON...")
    json_bytes = msg.model_dump_json(by_alias=True).encode("utf-8")
    print(f"   msgwire size: {len(data)} bytes, JSON size: {len(json_bytes)} bytes")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
