"""Request models for torrent record construction."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .fields import check_requested_fields


class RecordOptions(BaseModel):
    """Options for building or updating a torrent record."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "currentTime": "2024-05-01T12:00:00Z",
                    "requestedData": ["hash", "name", "status", "percentComplete"],
                },
            ]
        },
    )

    current_time: datetime | None = Field(
        None,
        alias="currentTime",
        description="Timestamp stamped on the record, defaults to now",
    )
    requested_data: list[str] | None = Field(
        None,
        alias="requestedData",
        description="Fields to compute, defaults to the full field set",
    )

    @field_validator("requested_data", mode="before")
    @classmethod
    def _tolerate_malformed_requested_data(cls, value: Any) -> Any:
        return check_requested_fields(value)

    @classmethod
    def coerce(
        cls, options: "RecordOptions | dict[str, Any] | None"
    ) -> "RecordOptions":
        """Build options from a model instance, a raw mapping, or None."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(options)
