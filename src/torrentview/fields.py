"""Record field names and field list selection."""

from collections.abc import Sequence
from enum import StrEnum
from typing import Any

from . import config, logger

# Reserved delimiter used by the client response layer to pack composite values
FIELD_DELIMITER = "@!@"


class TorrentField(StrEnum):
    """Field names of a torrent view record."""

    # Torrent list data
    HASH = "hash"
    ADDED = "added"
    BYTES_DONE = "bytesDone"
    DOWNLOAD_RATE = "downloadRate"
    DOWNLOAD_TOTAL = "downloadTotal"
    ETA = "eta"
    NAME = "name"
    PERCENT_COMPLETE = "percentComplete"
    RATIO = "ratio"
    SIZE_BYTES = "sizeBytes"
    STATUS = "status"
    TOTAL_PEERS = "totalPeers"
    TOTAL_SEEDS = "totalSeeds"
    UPLOAD_TOTAL = "uploadTotal"
    UPLOAD_RATE = "uploadRate"
    PRIORITY = "priority"
    TRACKERS = "trackers"

    # Torrent details data
    CREATION_DATE = "creationDate"
    FREE_DISK_SPACE = "freeDiskSpace"
    CONNECTED_PEERS = "connectedPeers"
    CONNECTED_SEEDS = "connectedSeeds"
    MESSAGE = "message"
    BASE_PATH = "basePath"
    IGNORE_SCHEDULER = "ignoreScheduler"
    COMMENT = "comment"
    IS_PRIVATE = "isPrivate"
    DIRECTORY = "directory"
    FILENAME = "filename"
    IS_MULTI_FILE = "isMultiFile"
    TAGS = "tags"


# Declaration order of TorrentField is the default iteration order
DEFAULT_FIELDS: tuple[TorrentField, ...] = tuple(TorrentField)


def is_field_list(value: Any) -> bool:
    """Check whether a requested-data option is a usable list of field names."""
    return isinstance(value, list | tuple) and all(
        isinstance(field, str) for field in value
    )


def check_requested_fields(requested: Any) -> list[str] | None:
    """Validate a requested-data option.

    Logs a warning for anything but a list or tuple of field names.

    Returns:
        list[str] | None: The requested names, or None when the defaults
            should be used.
    """
    if requested is None:
        return None

    if not is_field_list(requested):
        logger.warning(
            "requestedData must be a list of field names, got %s; using defaults",
            type(requested).__name__,
        )
        return None

    return list(requested)


def default_fields() -> list[str]:
    """Get the default field list with profile exclusions applied.

    Returns:
        list[str]: Default field names, in declaration order.
    """
    excluded = set(config.cfg.profile.excluded_fields)
    return [field for field in DEFAULT_FIELDS if field not in excluded]


def resolve_fields(requested: Sequence[str] | Any | None = None) -> list[str]:
    """Resolve which fields a record build computes.

    Args:
        requested: Requested field names. None selects the defaults. Names are
            not validated; unknown names are copied through from the raw
            snapshot.

    Returns:
        list[str]: Field names to compute, in order.
    """
    fields = check_requested_fields(requested)
    if fields is None:
        return default_fields()
    return fields
