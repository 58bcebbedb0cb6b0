"""Validated query parameters for the endpoint accessors.

Each accessor operation builds one of these models before calling the façade,
so invalid input fails with `pydantic.ValidationError` before any I/O.
`to_params()` returns the primitive mapping handed to `request`.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Union

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

_DATES_RE = re.compile(r"^\d{8}(-\d{8})?$")
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DatesInput = Union[date, tuple[date, date], str]


def format_espn_date(value: date) -> str:
    """`date`/`datetime` -> `YYYYMMDD`."""

    if isinstance(value, datetime):
        value = value.date()
    return value.strftime("%Y%m%d")


def format_dates(value: DatesInput) -> str:
    """Serialize a date, a `(start, end)` range or an ESPN date string."""

    if isinstance(value, date):
        return format_espn_date(value)
    if isinstance(value, tuple):
        if len(value) != 2 or not all(isinstance(item, date) for item in value):
            raise ValueError(f"date range must be a (start, end) pair of dates, got {value!r}")
        start, end = (item.date() if isinstance(item, datetime) else item for item in value)
        if end < start:
            raise ValueError("date range end is before its start")
        return f"{format_espn_date(start)}-{format_espn_date(end)}"
    text = str(value).strip()
    if _ISO_DATE_RE.match(text):
        text = text.replace("-", "")
    if not _DATES_RE.match(text):
        raise ValueError(f"dates must look like YYYYMMDD or YYYYMMDD-YYYYMMDD, got {value!r}")
    return text


class QueryParams(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    def to_params(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class NewsQuery(QueryParams):
    limit: int | None = Field(default=None, ge=1, le=1000)
    team: str | None = Field(default=None, min_length=1)


class TeamsQuery(QueryParams):
    limit: int | None = Field(default=None, ge=1, le=1000)


class SeasonQuery(QueryParams):
    season: int | None = Field(default=None, ge=1900, le=2999)
    seasontype: int | None = Field(default=None, ge=1, le=4)


class ScoreboardQuery(QueryParams):
    dates: str | None = None
    week: int | None = Field(default=None, ge=1, le=25)
    seasontype: int | None = Field(default=None, ge=1, le=4)
    limit: int | None = Field(default=None, ge=1, le=1000)
    groups: str | None = Field(default=None, min_length=1)

    @field_validator("dates", mode="before")
    @classmethod
    def _serialize_dates(cls, value: Any) -> Any:
        if value is None:
            return None
        return format_dates(value)

    @field_validator("groups", mode="before")
    @classmethod
    def _groups_to_str(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class GameLogQuery(QueryParams):
    season: int | None = Field(default=None, ge=1900, le=2999)


class SummaryQuery(QueryParams):
    event: str = Field(..., min_length=1)


def resource_id(value: str | int) -> str:
    """Validate an ESPN identifier used as a path segment."""

    if isinstance(value, bool):
        raise ValueError("identifier must be a string or an int")
    if isinstance(value, int):
        if value <= 0:
            raise ValueError(f"identifier must be positive, got {value}")
        return str(value)
    text = str(value).strip()
    if not text or "/" in text:
        raise ValueError(f"invalid identifier: {value!r}")
    return text
