"""Torrent view record construction."""

import copy
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from . import logger
from .derivers import derive_field
from .fields import TorrentField, resolve_fields
from .models import RecordOptions
from .notifier import RecordComparator


def build_record(
    raw: Mapping[str, Any], fields: list[str] | None = None
) -> dict[str, Any]:
    """Build a view record from a raw client snapshot.

    Pure function: no notifier call, no state.

    Args:
        raw: Raw torrent snapshot.
        fields: Fields to compute. None selects the default field list.

    Returns:
        dict[str, Any]: Record holding every requested field.
    """
    if fields is None:
        fields = resolve_fields()
    return {field: derive_field(field, raw) for field in fields}


class TorrentRecord:
    """Normalized view of a single torrent.

    Holds the current record and the one it replaced. Every construction and
    update rebuilds the whole record from a raw snapshot and hands copies of
    both records to the notifier.
    """

    def __init__(
        self,
        raw: Mapping[str, Any] | None = None,
        options: RecordOptions | dict[str, Any] | None = None,
        notifier: RecordComparator | None = None,
    ):
        self.notifier = notifier
        self.previous: dict[str, Any] = {}
        self.current: dict[str, Any] = {}
        self.last_updated: datetime | None = None

        if raw is None:
            return

        self.update(raw, options)

    @property
    def data(self) -> dict[str, Any]:
        """Copy of the current record."""
        return dict(self.current)

    @property
    def base_path(self) -> Any:
        return self.current.get(TorrentField.BASE_PATH)

    @property
    def status(self) -> list[str]:
        return self.current.get(TorrentField.STATUS) or []

    @property
    def tags(self) -> list[str]:
        return self.current.get(TorrentField.TAGS) or []

    @property
    def trackers(self) -> list[str]:
        return self.current.get(TorrentField.TRACKERS) or []

    def update(
        self,
        raw: Mapping[str, Any],
        options: RecordOptions | dict[str, Any] | None = None,
    ) -> None:
        """Rebuild the record from a new raw snapshot.

        Args:
            raw: Raw torrent snapshot.
            options: Build options, either a RecordOptions or a mapping with
                ``currentTime`` / ``requestedData`` keys.

        Raises:
            pydantic.ValidationError: If currentTime cannot be read as a
                timestamp.
        """
        opts = RecordOptions.coerce(options)
        record = build_record(raw, resolve_fields(opts.requested_data))

        self._notify(copy.deepcopy(self.current), copy.deepcopy(record))

        self.previous = self.current
        self.current = record
        self.last_updated = opts.current_time or datetime.now(UTC)

    def _notify(self, previous: dict[str, Any], current: dict[str, Any]) -> None:
        if self.notifier is None:
            return

        try:
            self.notifier.compare_new_torrent_data(previous, current)
        except Exception as e:
            logger.error(
                "Notifier failed for torrent %s: %s",
                current.get(TorrentField.HASH, "<unknown>"),
                e,
            )

    def __repr__(self) -> str:
        return (
            f"TorrentRecord(hash={self.current.get(TorrentField.HASH)!r}, "
            f"status={self.status!r}, last_updated={self.last_updated!r})"
        )
