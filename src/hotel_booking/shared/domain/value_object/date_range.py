from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator

from hotel_booking.shared.domain.exception.exceptions import (
    InvalidDateRangeException,
)


@dataclass(frozen=True)
class DateRange:
    """日付範囲(開始日・終了日ともに含む)"""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidDateRangeException(
                f"The start date cannot be later than the end date: "
                f"{self.start} > {self.end}"
            )

    @classmethod
    def from_iso(cls, start: str, end: str) -> DateRange:
        """YYYY-MM-DD 形式の文字列から生成"""
        try:
            start_date = date.fromisoformat(start)
            end_date = date.fromisoformat(end)
        except ValueError as e:
            raise InvalidDateRangeException(f"Invalid date format: {e}") from e
        return cls(start=start_date, end=end_date)

    def __str__(self) -> str:
        return f"{self.start.isoformat()}/{self.end.isoformat()}"

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    def overlaps(self, other: DateRange) -> bool:
        """他の範囲と1日でも重なるかどうか"""
        return not (other.end < self.start or other.start > self.end)

    def contains(self, day: date) -> bool:
        """指定日が範囲内かどうか"""
        return self.start <= day <= self.end

    def days(self) -> Iterator[date]:
        """範囲内の日付を昇順に列挙する"""
        for offset in range(len(self)):
            yield self.start + timedelta(days=offset)
