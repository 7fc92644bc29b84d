"""Optional per-call render arguments."""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RenderContext(BaseModel):
    """Date arguments for templates that compute deadlines.

    Accepts snake_case or camelCase keys (``startDate``, ``dayOffset``).

    Attributes:
        start_date: Date the response window opened (None renders a placeholder)
        day_offset: Length of the response window in calendar days. When None,
            the estoppel document type's own window (10 or 28) is used.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    start_date: Optional[date] = Field(
        default=None,
        description="Start of the response window",
    )

    day_offset: Optional[int] = Field(
        default=None,
        description="Response window length in calendar days",
        ge=0,
        le=3650,
    )

    @field_validator("start_date", mode="before")
    @classmethod
    def truncate_start_date(cls, value: Any) -> Any:
        """Reduce datetimes and ISO timestamps to their calendar date."""
        if isinstance(value, str) and not value.strip():
            return None
        if not isinstance(value, (str, date)):
            return value
        from instrument_engine.template.dates import parse_start_date

        return parse_start_date(value)
