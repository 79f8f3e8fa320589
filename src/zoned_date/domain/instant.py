from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from zoned_date.domain import calendar


class UtcInstant(BaseModel):
    """An absolute point in time, held as epoch milliseconds.

    Only UTC-domain accessors live here. Nothing on this type knows about zones,
    which is what lets zone providers receive it without any risk of calling
    back into zone resolution.
    """

    value: float = Field(alias="ms")
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="after")
    def _clip(self) -> "UtcInstant":
        object.__setattr__(self, "value", calendar.time_clip(self.value))
        return self

    @classmethod
    def invalid(cls) -> "UtcInstant":
        return cls(ms=calendar.INVALID_TIME)

    def get_time(self) -> float:
        return self.value

    def is_valid(self) -> bool:
        return calendar.is_finite(self.value)

    # Getters -------------------------------------------------------------

    def get_utc_full_year(self) -> float:
        return calendar.year_from_time(self.value)

    def get_utc_month(self) -> float:
        return calendar.month_from_time(self.value)

    def get_utc_date(self) -> float:
        return calendar.date_from_time(self.value)

    def get_utc_day(self) -> float:
        return calendar.week_day(self.value)

    def get_utc_hours(self) -> float:
        return calendar.hour_from_time(self.value)

    def get_utc_minutes(self) -> float:
        return calendar.min_from_time(self.value)

    def get_utc_seconds(self) -> float:
        return calendar.sec_from_time(self.value)

    def get_utc_milliseconds(self) -> float:
        return calendar.ms_from_time(self.value)

    # Builders ------------------------------------------------------------
    # Each returns a new instant with the given UTC fields replaced. Omitted
    # trailing fields (None) keep their current value.

    def with_utc_full_year(self, year: Any, month: Optional[Any] = None, date: Optional[Any] = None) -> "UtcInstant":
        t = self.value if self.is_valid() else 0
        month = calendar.month_from_time(t) if month is None else month
        date = calendar.date_from_time(t) if date is None else date
        day = calendar.make_day(year, month, date)
        return UtcInstant(ms=calendar.make_date(day, calendar.time_within_day(t)))

    def with_utc_year(self, year: Any) -> "UtcInstant":
        """Two-digit-era variant: years 0-99 mean 1900-1999."""
        y = calendar.to_integer(year)
        if not calendar.is_finite(y):
            return UtcInstant.invalid()
        if 0 <= y <= 99:
            y += 1900
        return self.with_utc_full_year(y)

    def with_utc_month(self, month: Any, date: Optional[Any] = None) -> "UtcInstant":
        t = self.value
        date = calendar.date_from_time(t) if date is None else date
        day = calendar.make_day(calendar.year_from_time(t), month, date)
        return UtcInstant(ms=calendar.make_date(day, calendar.time_within_day(t)))

    def with_utc_date(self, date: Any) -> "UtcInstant":
        t = self.value
        day = calendar.make_day(calendar.year_from_time(t), calendar.month_from_time(t), date)
        return UtcInstant(ms=calendar.make_date(day, calendar.time_within_day(t)))

    def with_utc_hours(
        self,
        hours: Any,
        minutes: Optional[Any] = None,
        seconds: Optional[Any] = None,
        ms: Optional[Any] = None,
    ) -> "UtcInstant":
        t = self.value
        minutes = calendar.min_from_time(t) if minutes is None else minutes
        seconds = calendar.sec_from_time(t) if seconds is None else seconds
        ms = calendar.ms_from_time(t) if ms is None else ms
        return self._with_time(calendar.make_time(hours, minutes, seconds, ms))

    def with_utc_minutes(self, minutes: Any, seconds: Optional[Any] = None, ms: Optional[Any] = None) -> "UtcInstant":
        t = self.value
        seconds = calendar.sec_from_time(t) if seconds is None else seconds
        ms = calendar.ms_from_time(t) if ms is None else ms
        return self._with_time(calendar.make_time(calendar.hour_from_time(t), minutes, seconds, ms))

    def with_utc_seconds(self, seconds: Any, ms: Optional[Any] = None) -> "UtcInstant":
        t = self.value
        ms = calendar.ms_from_time(t) if ms is None else ms
        return self._with_time(
            calendar.make_time(calendar.hour_from_time(t), calendar.min_from_time(t), seconds, ms)
        )

    def with_utc_milliseconds(self, ms: Any) -> "UtcInstant":
        t = self.value
        return self._with_time(
            calendar.make_time(
                calendar.hour_from_time(t), calendar.min_from_time(t), calendar.sec_from_time(t), ms
            )
        )

    def _with_time(self, time: float) -> "UtcInstant":
        return UtcInstant(ms=calendar.make_date(calendar.day_number(self.value), time))

    # Formatting ----------------------------------------------------------

    def to_iso_string(self) -> str:
        """``YYYY-MM-DDTHH:mm:ss.sssZ``; years outside 0-9999 use the signed six-digit form."""
        if not self.is_valid():
            raise ValueError("Invalid time value")
        year = self.get_utc_full_year()
        if 0 <= year <= 9999:
            year_text = f"{year:04d}"
        else:
            year_text = f"{'-' if year < 0 else '+'}{abs(year):06d}"
        return (
            f"{year_text}-{self.get_utc_month() + 1:02d}-{self.get_utc_date():02d}"
            f"T{self.get_utc_hours():02d}:{self.get_utc_minutes():02d}:{self.get_utc_seconds():02d}"
            f".{self.get_utc_milliseconds():03d}Z"
        )

    def to_utc_string(self) -> str:
        if not self.is_valid():
            return "Invalid Date"
        return (
            f"{calendar.WEEKDAY_NAMES[self.get_utc_day()]}, {self.get_utc_date():02d} "
            f"{calendar.MONTH_NAMES[self.get_utc_month()]} {self.get_utc_full_year():04d} "
            f"{self.get_utc_hours():02d}:{self.get_utc_minutes():02d}:{self.get_utc_seconds():02d} GMT"
        )
