"""Shared test fixtures and configuration for torrentview tests."""

from collections.abc import Iterator
from typing import Any

import pytest

import torrentview.logger as logger_module
from torrentview import config as torrentview_config


def pytest_configure(config: pytest.Config) -> None:
    """Initialize logger once for all tests."""
    if getattr(logger_module, "_logger_instance", None) is None:
        logger_module.init_logger()


@pytest.fixture(autouse=True)
def reset_config() -> Iterator[None]:
    """Restore default configuration after every test."""
    yield
    torrentview_config.init_config()


@pytest.fixture
def seeding_snapshot() -> dict[str, Any]:
    """Raw snapshot of a complete torrent that is seeding."""
    return {
        "hash": "ABCDEF0123456789ABCDEF0123456789ABCDEF01",
        "name": "ubuntu-24.04-desktop-amd64.iso",
        "isHashChecking": "0",
        "isComplete": "1",
        "isOpen": "1",
        "state": "1",
        "uploadRate": "2048",
        "downloadRate": "0",
        "downloadTotal": "6000000000",
        "uploadTotal": "12000000000",
        "bytesDone": "6000000000",
        "sizeBytes": "6000000000",
        "ratio": "2000",
        "priority": "2",
        "message": "",
        "tags": "linux,iso%20images",
        "trackers": (
            "https://torrent.ubuntu.com/announce"
            "@!@udp://tracker.example.co.uk:6969/announce"
        ),
        "totalPeers": "42@!@7",
        "totalSeeds": "1337@!@3",
        "added": " 1714564800 ",
        "creationDate": "0",
        "freeDiskSpace": "500000000000",
        "connectedPeers": "4",
        "connectedSeeds": "0",
        "basePath": "/downloads/ubuntu-24.04-desktop-amd64.iso",
        "ignoreScheduler": "0",
        "comment": "Ubuntu CD releases.ubuntu.com",
        "isPrivate": "0",
        "directory": "/downloads",
        "filename": "ubuntu-24.04-desktop-amd64.iso",
        "isMultiFile": "0",
    }


@pytest.fixture
def downloading_snapshot(seeding_snapshot: dict[str, Any]) -> dict[str, Any]:
    """Raw snapshot of a torrent halfway through downloading."""
    return {
        **seeding_snapshot,
        "isComplete": "0",
        "uploadRate": "0",
        "downloadRate": "1000000",
        "bytesDone": "3000000000",
    }
