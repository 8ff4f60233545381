from typing import Iterable

from hotel_booking.booking.domain.entity import Booking, Room
from hotel_booking.booking.domain.repository import (
    BookingRepository,
    RoomRepository,
)
from hotel_booking.shared.domain import DuplicateResourceException


class InMemoryBookingRepository(BookingRepository):
    """リストで保持する BookingRepository の具象実装

    ローカル実行・テスト用。登録順を保持する。
    """

    def __init__(self, bookings: Iterable[Booking] = ()) -> None:
        self._bookings: list[Booking] = []
        self._next_id = 1
        for booking in bookings:
            self.add(booking)

    def get_all(self) -> list[Booking]:
        return list(self._bookings)

    def add(self, booking: Booking) -> None:
        if booking.id is None:
            booking.assign_id(self._next_id)
        elif any(b.id == booking.id for b in self._bookings):
            raise DuplicateResourceException(f"Booking already exists: {booking.id}")
        self._next_id = max(self._next_id, booking.id + 1)
        self._bookings.append(booking)


class InMemoryRoomRepository(RoomRepository):
    """リストで保持する RoomRepository の具象実装"""

    def __init__(self, rooms: Iterable[Room] = ()) -> None:
        self._rooms: list[Room] = []
        for room in rooms:
            self.add(room)

    def get_all(self) -> list[Room]:
        return list(self._rooms)

    def add(self, room: Room) -> None:
        if any(r.id == room.id for r in self._rooms):
            raise DuplicateResourceException(f"Room already exists: {room.id}")
        self._rooms.append(room)
