"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from msgwire import Message


@pytest.fixture
def sample_message() -> Message:
    """Message with four of the eight fields set."""
    return Message(id="m1", userId="u1", subject="Hi", message="Hello world")


@pytest.fixture
def full_message() -> Message:
    """Message with every field set."""
    return Message(
        id="m42",
        userId="user-7",
        notificationId="n-99",
        email="diver@example.org",
        phone="+1 555 0100",
        subject="Surfacing",
        message="Back on the surface at 14:02, all good.",
        parentId="m41",
    )
