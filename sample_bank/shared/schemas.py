from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, model_validator
from pydantic.alias_generators import to_camel

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Anything outside signed 64-bit cannot be stored, so reject it while decoding
Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


def format_timestamp(value: datetime) -> str:
    """RFC 3339 in UTC with second precision; naive values are taken as UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(TIMESTAMP_FORMAT)


Timestamp = Annotated[datetime, PlainSerializer(format_timestamp, return_type=str, when_used="json")]


class WireModel(BaseModel):
    """camelCase on the wire, snake_case attributes, unknown fields ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _null_means_default(cls, data: Any) -> Any:
        # An explicit null leaves the field at its zero value
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class TimeStampSchema(WireModel):
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None
    deleted_at: Optional[Timestamp] = None
