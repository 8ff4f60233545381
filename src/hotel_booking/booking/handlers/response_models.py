from __future__ import annotations

from datetime import date

from pydantic import BaseModel

from hotel_booking.booking.domain.entity import Booking


class AvailableRoomData(BaseModel):
    """空室検索結果のレスポンスモデル"""

    room_id: int
    available: bool
    start_date: date
    end_date: date


class OccupiedDatesData(BaseModel):
    """満室日一覧のレスポンスモデル"""

    dates: list[date]
    count: int


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: int | None
    start_date: date
    end_date: date
    customer_id: int
    room_id: int
    is_active: bool


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: AvailableRoomData | OccupiedDatesData | BookingData


def to_booking_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=BookingData(
            booking_id=booking.id,
            start_date=booking.start_date,
            end_date=booking.end_date,
            customer_id=booking.customer_id,
            room_id=booking.room_id,
            is_active=booking.is_active,
        )
    ).model_dump(mode="json")


def to_available_room_response(room_id: int, start_date: date, end_date: date) -> dict:
    """空室検索結果をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=AvailableRoomData(
            room_id=room_id,
            available=room_id >= 0,
            start_date=start_date,
            end_date=end_date,
        )
    ).model_dump(mode="json")


def to_occupied_dates_response(dates: list[date]) -> dict:
    """満室日一覧をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=OccupiedDatesData(dates=dates, count=len(dates))
    ).model_dump(mode="json")
