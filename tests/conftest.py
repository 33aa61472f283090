import base64
from unittest.mock import Mock

import pytest

from azure_storage_cli import storage
from azure_storage_cli.models import Command, EffectiveSettings


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run every test in an empty directory without storage credentials set."""
    monkeypatch.delenv("STORAGE_ACCOUNT", raising=False)
    monkeypatch.delenv("STORAGE_MASTER_KEY", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def account():
    return "testaccount"


@pytest.fixture
def master_key():
    return base64.b64encode(b"dummy-master-key").decode("ascii")


@pytest.fixture
def client(account, master_key):
    """Fixture to initialize a BlobStorageClient instance."""
    with storage.BlobStorageClient(account, master_key) as c:
        yield c


@pytest.fixture
def mock_client():
    """Fixture for a storage client that records calls instead of sending them."""
    return Mock(spec=storage.BlobStorageClient)


@pytest.fixture
def make_settings(account, master_key):
    """Fixture to build settings for a command with credentials filled in."""

    def _make(command: Command, **kwargs) -> EffectiveSettings:
        return EffectiveSettings(
            command=command,
            storage_account=account,
            storage_master_key=master_key,
            **kwargs,
        )

    return _make


@pytest.fixture
def requests_mock():
    """Fixture for requests-mock."""
    import requests_mock as rm

    with rm.Mocker() as m:
        yield m
