"""
Field derivers for torrent view records.

Each deriver is a pure function reading a raw client snapshot and returning
the normalized value of one record field. FIELD_SPECS maps field names to
their derivers; fields without an entry are copied through unchanged.
"""

import math
import re
from collections.abc import Callable, Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any
from urllib.parse import unquote

import msgspec

from .fields import FIELD_DELIMITER, TorrentField
from .formatting import format_duration
from .status import derive_status

# Sentinel ETA for torrents that are not downloading
ETA_INFINITY = "Infinity"

# Hostname of the authority part, scheme and userinfo optional. A leading
# "www." is not part of the host. Used with match(), anchored at the entry start.
DOMAIN_NAME_PATTERN = re.compile(
    r"(?:[a-z][a-z0-9+.-]*://)?(?:[^@/?#]*@)?(?:www\.)?"
    r"((?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z]{2,63})(?=[:/?#]|$)",
    re.IGNORECASE,
)


def _to_number(value: Any) -> float:
    """Convert a raw numeric value to float, NaN when it is not a number."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _to_fixed(value: float, digits: int) -> float:
    """Round the exact binary value of a float, ties away from zero."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def get_eta(raw: Mapping[str, Any]) -> str:
    """Estimate the remaining download time.

    Args:
        raw: Raw torrent snapshot.

    Returns:
        str: Formatted duration, or "Infinity" when nothing is downloading.
    """
    rate = _to_number(raw.get("downloadRate"))
    if not rate > 0:
        return ETA_INFINITY

    remaining = _to_number(raw.get("sizeBytes")) - _to_number(raw.get("bytesDone"))
    return format_duration(remaining / rate)


def get_percent_complete(raw: Mapping[str, Any]) -> float:
    """Compute the completion percentage.

    Values strictly between 0 and 10 are rounded to 2 decimals, values
    strictly between 10 and 100 to 1 decimal. Everything else (0, 10, 100,
    NaN, infinities) is returned unrounded.
    """
    percent = (
        _divide(_to_number(raw.get("bytesDone")), _to_number(raw.get("sizeBytes")))
        * 100
    )

    if 0 < percent < 10:
        return _to_fixed(percent, 2)
    if 10 < percent < 100:
        return _to_fixed(percent, 1)
    return percent


def get_tags(raw: Mapping[str, Any]) -> list[str]:
    """Split and decode the comma-joined tag list.

    Tokens are sorted in their percent-encoded form, then decoded.
    """
    tags = raw.get("tags")
    if not tags:
        return []

    return [unquote(tag) for tag in sorted(str(tags).split(","))]


def registrable_domain(tracker_url: str) -> str | None:
    """Reduce a tracker URL to its registrable domain.

    Keeps the last two host labels, or the last three when the second-level
    label is at most three characters long (``example.co.uk``). This
    approximates public suffix matching without a suffix list.

    Args:
        tracker_url: Tracker announce URL.

    Returns:
        str | None: Registrable domain, or None if no hostname was found.
    """
    match = DOMAIN_NAME_PATTERN.match(tracker_url.strip())
    if not match:
        return None

    labels = match.group(1).split(".")
    desired_labels = 2

    if len(labels) > desired_labels and len(labels[-desired_labels]) <= 3:
        desired_labels += 1

    return ".".join(labels[-desired_labels:])


def get_trackers(raw: Mapping[str, Any]) -> list[str]:
    """Extract tracker domains, in tracker order, without de-duplication."""
    trackers = raw.get("trackers")
    if not trackers:
        return []

    domains = []
    for tracker in str(trackers).split(FIELD_DELIMITER):
        domain = registrable_domain(tracker)
        if domain:
            domains.append(domain)
    return domains


def parse_peer_count(value: Any) -> int:
    """Parse a ``<count>@!@<extra>`` value into its count.

    The whole string is used when the delimiter is absent. Missing or
    non-numeric counts yield 0.
    """
    if value is None:
        return 0

    count, _, _ = str(value).partition(FIELD_DELIMITER)
    try:
        return int(count.strip())
    except ValueError:
        return 0


def get_total_peers(raw: Mapping[str, Any]) -> int:
    return parse_peer_count(raw.get("totalPeers"))


def get_total_seeds(raw: Mapping[str, Any]) -> int:
    return parse_peer_count(raw.get("totalSeeds"))


def clean_up_date(dirty_date: Any) -> str:
    """Normalize a raw date value, mapping blank and "0" to an empty string."""
    if not dirty_date:
        return ""

    date = str(dirty_date).strip()
    if date == "0":
        return ""
    return date


def get_added(raw: Mapping[str, Any]) -> str:
    return clean_up_date(raw.get("added"))


def get_creation_date(raw: Mapping[str, Any]) -> str:
    return clean_up_date(raw.get("creationDate"))


class FieldSpec(msgspec.Struct, frozen=True):
    """Derivation specification for one record field."""

    requires: frozenset[str]
    extractor: Callable[[Mapping[str, Any]], Any]


FIELD_SPECS: dict[str, FieldSpec] = {
    TorrentField.STATUS: FieldSpec(
        requires=frozenset(
            {
                "isHashChecking",
                "isComplete",
                "isOpen",
                "state",
                "message",
                "uploadRate",
                "downloadRate",
            }
        ),
        extractor=derive_status,
    ),
    TorrentField.ETA: FieldSpec(
        requires=frozenset({"downloadRate", "bytesDone", "sizeBytes"}),
        extractor=get_eta,
    ),
    TorrentField.PERCENT_COMPLETE: FieldSpec(
        requires=frozenset({"bytesDone", "sizeBytes"}),
        extractor=get_percent_complete,
    ),
    TorrentField.TAGS: FieldSpec(requires=frozenset({"tags"}), extractor=get_tags),
    TorrentField.TRACKERS: FieldSpec(
        requires=frozenset({"trackers"}), extractor=get_trackers
    ),
    TorrentField.TOTAL_PEERS: FieldSpec(
        requires=frozenset({"totalPeers"}), extractor=get_total_peers
    ),
    TorrentField.TOTAL_SEEDS: FieldSpec(
        requires=frozenset({"totalSeeds"}), extractor=get_total_seeds
    ),
    TorrentField.ADDED: FieldSpec(requires=frozenset({"added"}), extractor=get_added),
    TorrentField.CREATION_DATE: FieldSpec(
        requires=frozenset({"creationDate"}), extractor=get_creation_date
    ),
}


def derive_field(field: str, raw: Mapping[str, Any]) -> Any:
    """Compute one record field from a raw snapshot.

    Args:
        field: Record field name.
        raw: Raw torrent snapshot.

    Returns:
        Any: The derived value, or the raw value (None if missing) for fields
            without a deriver.
    """
    spec = FIELD_SPECS.get(field)
    if spec is None:
        return raw.get(field)
    return spec.extractor(raw)


def required_raw_fields(fields: list[str]) -> set[str]:
    """Get the raw snapshot fields a record build reads for the given fields.

    Useful for asking the client only for what the record needs.
    """
    required: set[str] = set()
    for field in fields:
        spec = FIELD_SPECS.get(field)
        required |= spec.requires if spec is not None else {field}
    return required
