"""
Shared test fixtures and configuration for the resource_fetch test suite.
"""

import os
from pathlib import Path
from typing import Iterable, List, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import aioftp
import aioresponses
import pytest

from resource_fetch.config import GlobalConfig, reset_config, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Pin the process-wide configuration so files and env vars can't leak in."""
    config = GlobalConfig()
    set_config(config)
    yield config
    reset_config()


@pytest.fixture
def in_tmp_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with a temporary directory as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def mock_aiohttp():
    """Mock aiohttp responses for testing."""
    with aioresponses.aioresponses() as m:
        yield m


class FakeDownloadStream:
    """Stand-in for the async context manager aioftp.Client.download_stream returns."""

    def __init__(
        self,
        blocks: Iterable[bytes],
        enter_error: Optional[BaseException] = None,
        mid_error: Optional[BaseException] = None,
    ) -> None:
        self.blocks = list(blocks)
        self.enter_error = enter_error
        self.mid_error = mid_error

    async def __aenter__(self) -> "FakeDownloadStream":
        if self.enter_error is not None:
            raise self.enter_error
        return self

    async def __aexit__(self, *exc_info) -> bool:
        return False

    async def iter_by_block(self):
        for block in self.blocks:
            yield block
        if self.mid_error is not None:
            raise self.mid_error


def status_code_error(code: str = "550", info: str = "Failed") -> aioftp.StatusCodeError:
    """Build the error aioftp raises for an unexpected reply code."""
    return aioftp.StatusCodeError(("2xx",), (code,), [f" {info}"])


def make_ftp_client(
    *,
    blocks: Iterable[bytes] = (b"remote file bytes",),
    connect_error: Optional[BaseException] = None,
    upgrade_error: Optional[BaseException] = None,
    login_error: Optional[BaseException] = None,
    retrieve_error: Optional[BaseException] = None,
    transfer_error: Optional[BaseException] = None,
    quit_error: Optional[BaseException] = None,
) -> MagicMock:
    """Create a mock aioftp.Client whose steps succeed unless told otherwise."""
    client = MagicMock(name="aioftp.Client()")
    client.connect = AsyncMock(side_effect=connect_error)
    client.upgrade_to_tls = AsyncMock(side_effect=upgrade_error)
    client.login = AsyncMock(side_effect=login_error)
    client.quit = AsyncMock(side_effect=quit_error)
    client.close = MagicMock()
    client.download_stream = MagicMock(
        return_value=FakeDownloadStream(
            blocks, enter_error=retrieve_error, mid_error=transfer_error
        )
    )
    return client


class FTPClientQueue:
    """Mock aioftp.Client instances handed out in order by the patched factory."""

    def __init__(self) -> None:
        self.clients: List[MagicMock] = []
        self.created = 0
        self.factory: Optional[MagicMock] = None

    def add(self, **kwargs) -> MagicMock:
        client = make_ftp_client(**kwargs)
        self.clients.append(client)
        return client

    def __call__(self, *args, **kwargs) -> MagicMock:
        client = self.clients[self.created]
        self.created += 1
        return client


@pytest.fixture
def ftp_clients():
    """
    Patch aioftp.Client in the FTP fetcher.

    Queue mock clients with ``ftp_clients.add(...)``; each aioftp.Client()
    call hands out the next one.
    """
    queue = FTPClientQueue()
    with patch("resource_fetch.ftp.fetcher.aioftp.Client", side_effect=queue) as factory:
        queue.factory = factory
        yield queue


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (requires network)"
    )
    config.addinivalue_line("markers", "ftp: mark test as FTP-related")
    config.addinivalue_line("markers", "http: mark test as HTTP-related")
    config.addinivalue_line("markers", "cli: mark test as CLI-related")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test paths and skip network tests unless enabled."""
    run_network = os.getenv("RESOURCE_FETCH_NETWORK_TESTS") == "1"
    skip_network = pytest.mark.skip(reason="set RESOURCE_FETCH_NETWORK_TESTS=1 to run")

    for item in items:
        if "test_ftp" in item.nodeid:
            item.add_marker(pytest.mark.ftp)
        elif "test_http" in item.nodeid:
            item.add_marker(pytest.mark.http)
        elif "test_cli" in item.nodeid:
            item.add_marker(pytest.mark.cli)

        if "integration" in item.keywords and not run_network:
            item.add_marker(skip_network)
