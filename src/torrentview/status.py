"""Torrent status classification from raw client flags."""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any


class TorrentStatus(StrEnum):
    """Status tags that can appear in a record's status list."""

    CHECKING = "checking"
    COMPLETE = "complete"
    SEEDING = "seeding"
    PAUSED = "paused"
    STOPPED = "stopped"
    DOWNLOADING = "downloading"
    ERROR = "error"
    ACTIVE = "active"
    INACTIVE = "inactive"


def _flag(value: Any) -> str:
    # XML-RPC clients report 0/1 integers, others report "0"/"1" strings
    return "" if value is None else str(value)


def _primary_status(
    is_hash_checking: str, is_complete: str, is_open: str, state: str
) -> list[TorrentStatus]:
    """Classify the torrent from its lifecycle flags.

    First match wins. Flag combinations outside the known cases produce no
    primary tag.
    """
    if is_hash_checking == "1":
        return [TorrentStatus.CHECKING]
    if is_complete == "1" and is_open == "1" and state == "1":
        return [TorrentStatus.COMPLETE, TorrentStatus.SEEDING]
    if is_complete == "1" and is_open == "1" and state == "0":
        return [TorrentStatus.PAUSED]
    if is_complete == "1" and is_open == "0":
        # Closed torrents lead with "stopped", the reverse of the seeding case
        return [TorrentStatus.STOPPED, TorrentStatus.COMPLETE]
    if is_complete == "0" and is_open == "1" and state == "1":
        return [TorrentStatus.DOWNLOADING]
    if is_complete == "0" and is_open == "1" and state == "0":
        return [TorrentStatus.PAUSED]
    if is_complete == "0" and is_open == "0":
        return [TorrentStatus.STOPPED]
    return []


def derive_status(raw: Mapping[str, Any]) -> list[TorrentStatus]:
    """Build the ordered status tag list for a raw torrent snapshot.

    The list holds the primary classification, then ``error`` when the client
    reports a message, then exactly one activity tag (``inactive`` when both
    transfer rates are zero, ``active`` otherwise). Consumers render the tags
    in list order.

    Args:
        raw: Raw torrent snapshot from the client.

    Returns:
        list[TorrentStatus]: Ordered status tags, always ending with an
            activity tag.
    """
    status = _primary_status(
        _flag(raw.get("isHashChecking")),
        _flag(raw.get("isComplete")),
        _flag(raw.get("isOpen")),
        _flag(raw.get("state")),
    )

    if raw.get("message"):
        status.append(TorrentStatus.ERROR)

    if _flag(raw.get("uploadRate")) == "0" and _flag(raw.get("downloadRate")) == "0":
        status.append(TorrentStatus.INACTIVE)
    else:
        status.append(TorrentStatus.ACTIVE)

    return status
