"""Tests for settings models."""

import dataclasses

import pytest

from azure_storage_cli.models import Command, EffectiveSettings, PartialSettings


class TestCommand:
    """Tests for the Command enum."""

    def test_from_name(self):
        """Test looking up every command by its command-line name."""
        assert Command.from_name("list") is Command.LIST
        assert Command.from_name("get") is Command.GET
        assert Command.from_name("put") is Command.PUT
        assert Command.from_name("append") is Command.APPEND
        assert Command.from_name("put-append") is Command.PUT_APPEND
        assert Command.from_name("delete") is Command.DELETE

    def test_from_name_unknown(self):
        """Test that unknown names are rejected."""
        with pytest.raises(ValueError, match="Invalid command"):
            Command.from_name("copy")

    def test_names(self):
        """Test the list of command-line names."""
        assert Command.names() == ["list", "get", "put", "append", "put-append", "delete"]

    def test_str(self):
        assert str(Command.PUT_APPEND) == "put-append"


class TestPartialSettings:
    """Tests for PartialSettings."""

    def test_defaults_not_provided(self):
        """Test that a new record provides nothing."""
        assert PartialSettings().provided() == {}

    def test_empty_strings_are_not_provided(self):
        """Test that empty strings are treated as not provided."""
        partial = PartialSettings(storage_account="", local="")

        assert partial.storage_account is None
        assert partial.local is None
        assert partial.provided() == {}

    def test_provided(self):
        """Test that only set fields are reported."""
        partial = PartialSettings(container="test", blob="hoge.txt")

        assert partial.provided() == {"container": "test", "blob": "hoge.txt"}

    def test_is_frozen(self):
        """Test that the record cannot be changed."""
        partial = PartialSettings(container="test")

        with pytest.raises(dataclasses.FrozenInstanceError):
            partial.container = "other"


class TestEffectiveSettings:
    """Tests for EffectiveSettings."""

    def test_defaults(self):
        """Test default values."""
        settings = EffectiveSettings(command=Command.LIST)

        assert settings.storage_account == ""
        assert settings.container == ""
        assert settings.debug is False

    def test_masked_hides_key(self):
        """Test that debug output does not contain the master key."""
        settings = EffectiveSettings(
            command=Command.GET, storage_account="acct", storage_master_key="abcdefghijkl"
        )

        masked = settings.masked()

        assert masked["storage_account"] == "acct"
        assert masked["storage_master_key"] == "abcd..."
        assert "abcdefghijkl" not in str(masked)
        assert masked["command"] == "get"

    def test_masked_empty_key(self):
        settings = EffectiveSettings(command=Command.LIST)

        assert settings.masked()["storage_master_key"] == ""
