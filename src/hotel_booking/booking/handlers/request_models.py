from pydantic import BaseModel, Field

from hotel_booking.shared.domain import DateRange

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class DateRangeRequest(BaseModel):
    """期間指定のリクエストモデル（クエリ文字列）"""

    start_date: str = Field(
        ...,
        pattern=DATE_PATTERN,
        description="開始日（YYYY-MM-DD形式）",
        examples=["2024-01-01"],
    )
    end_date: str = Field(
        ...,
        pattern=DATE_PATTERN,
        description="終了日（YYYY-MM-DD形式、当日を含む）",
        examples=["2024-01-03"],
    )

    def to_date_range(self) -> DateRange:
        return DateRange.from_iso(self.start_date, self.end_date)


class CreateBookingRequest(DateRangeRequest):
    """予約作成リクエストモデル"""

    customer_id: int = Field(..., ge=0, description="顧客ID")
