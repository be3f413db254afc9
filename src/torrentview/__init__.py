"""torrentview: normalized view records for BitTorrent client snapshots."""

from .derivers import FIELD_SPECS, FieldSpec, derive_field, required_raw_fields
from .fields import DEFAULT_FIELDS, FIELD_DELIMITER, TorrentField, resolve_fields
from .models import RecordOptions
from .notifier import (
    Notifier,
    RecordComparator,
    TorrentNotificationService,
    get_notifier,
    init_notifier,
)
from .record import TorrentRecord, build_record
from .status import TorrentStatus, derive_status

__all__ = [
    "DEFAULT_FIELDS",
    "FIELD_DELIMITER",
    "FIELD_SPECS",
    "FieldSpec",
    "Notifier",
    "RecordComparator",
    "RecordOptions",
    "TorrentField",
    "TorrentNotificationService",
    "TorrentRecord",
    "TorrentStatus",
    "build_record",
    "derive_field",
    "derive_status",
    "get_notifier",
    "init_notifier",
    "required_raw_fields",
    "resolve_fields",
]
