"""Tests for request data models."""

import dataclasses

import pytest

from slackit.models.request import Channel, SendRequest, User


class TestTarget:
    """Test Channel and User targets."""

    def test_channel_str(self):
        """Test that channels serialize with #."""
        assert str(Channel("general")) == "#general"

    def test_user_str(self):
        """Test that users serialize with @."""
        assert str(User("alice")) == "@alice"

    def test_name_excludes_sigil(self):
        """Test that the stored name has no sigil."""
        assert Channel("general").name == "general"
        assert User("alice").name == "alice"

    def test_variants_not_equal(self):
        """Test that a channel and user with the same name differ."""
        assert Channel("ops") != User("ops")

    def test_frozen(self):
        """Test that targets cannot be mutated."""
        channel = Channel("general")
        with pytest.raises(dataclasses.FrozenInstanceError):
            channel.name = "random"  # type: ignore[misc]


class TestSendRequest:
    """Test SendRequest dataclass."""

    def test_create_request(self, send_request: SendRequest, bot_token: str):
        """Test creating a SendRequest."""
        assert send_request.target == Channel("general")
        assert send_request.token == bot_token
        assert send_request.text == "deploy finished"
        assert send_request.sender_name is None

    def test_frozen(self, send_request: SendRequest):
        """Test that requests cannot be mutated."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            send_request.text = "changed"  # type: ignore[misc]

    def test_repr_hides_token(self, send_request: SendRequest, bot_token: str):
        """Test that the token never appears in the repr."""
        assert bot_token not in repr(send_request)
