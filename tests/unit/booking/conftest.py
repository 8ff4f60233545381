from datetime import date, timedelta
from unittest.mock import MagicMock

import pytest

from hotel_booking.booking.applications.booking_manager import BookingManager
from hotel_booking.booking.domain.entity import NO_ROOM_AVAILABLE, Booking, Room


@pytest.fixture
def create_test_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        start_date: date = date(2024, 6, 10),
        end_date: date = date(2024, 6, 12),
        room_id: int = NO_ROOM_AVAILABLE,
        is_active: bool = False,
        customer_id: int = 1,
        booking_id: int | None = None,
    ) -> Booking:
        return Booking(
            id=booking_id,
            start_date=start_date,
            end_date=end_date,
            customer_id=customer_id,
            room_id=room_id,
            is_active=is_active,
        )

    return _factory


@pytest.fixture
def three_rooms():
    return [
        Room(id=1, description="A"),
        Room(id=2, description="B"),
        Room(id=3, description="C"),
    ]


@pytest.fixture
def booking_repository():
    """予約ストアのモック（既定は予約0件）"""
    repository = MagicMock()
    repository.get_all.return_value = []
    return repository


@pytest.fixture
def room_repository():
    """客室ストアのモック（既定は客室0件）"""
    repository = MagicMock()
    repository.get_all.return_value = []
    return repository


@pytest.fixture
def manager(booking_repository, room_repository, today):
    return BookingManager(
        booking_repository=booking_repository,
        room_repository=room_repository,
        today=lambda: today,
    )


@pytest.fixture
def days_after(today):
    """本日から n 日後の日付を返す"""

    def _days_after(n: int) -> date:
        return today + timedelta(days=n)

    return _days_after
