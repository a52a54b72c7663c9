"""Response models."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, WithJsonSchema

# keep "+00:00" rather than pydantic's "Z"
IsoDateTime = Annotated[
    datetime,
    PlainSerializer(lambda value: value.isoformat(), return_type=str, when_used="json"),
    WithJsonSchema({"type": "string", "format": "date-time"}),
]


class CurrentTime(BaseModel):
    """The current date and time in several formats."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: IsoDateTime = Field(description="The instant the snapshot was taken.")
    rfc1123: str = Field(
        description="The time in RFC 1123 format.",
        examples=["Thu, 14 Nov 2024 17:30:00 GMT"],
    )
    unix_seconds: int = Field(
        alias="unixSeconds",
        description="Whole seconds since the UNIX epoch.",
        examples=[1731605400],
    )
    universal_sortable: str = Field(
        alias="universalSortable",
        description="The time in universal sortable format.",
        examples=["2024-11-14 17:30:00Z"],
    )
    universal_full: str = Field(
        alias="universalFull",
        description="The time in universal full format.",
        examples=["Thursday, 14 November 2024 17:30:00"],
    )
