from datetime import date
from typing import Callable

from hotel_booking.booking.domain.entity import NO_ROOM_AVAILABLE, Booking
from hotel_booking.booking.domain.repository import (
    BookingRepository,
    RoomRepository,
)
from hotel_booking.shared.domain import DateRange, InvalidDateRangeException
from hotel_booking.shared.utils import get_logger

logger = get_logger()


class BookingManager:
    """空室判定・予約作成のユースケース

    呼び出しごとに両ストアの全件スナップショットを取得し、メモリ上で判定する。
    呼び出し間で状態は保持しない。

    同じ期間に対する同時実行の create_booking は同じ空室を観測し、
    二重予約になり得る。直列化が必要な場合はストア側で行うこと。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        room_repository: RoomRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._booking_repository = booking_repository
        self._room_repository = room_repository
        self._today = today

    def find_available_room(self, start_date: date, end_date: date) -> int:
        """期間中ずっと空いている客室のIDを返す

        空室が無い場合は NO_ROOM_AVAILABLE (-1) を返す。
        開始日が本日以前、または開始日 > 終了日の場合は、
        ストアへアクセスする前に InvalidDateRangeException を送出する。
        """
        if start_date <= self._today():
            raise InvalidDateRangeException(
                f"The start date must be in the future: {start_date}"
            )
        period = DateRange(start=start_date, end=end_date)

        bookings = self._booking_repository.get_all()
        rooms = self._room_repository.get_all()

        for room in rooms:
            if not any(b.conflicts_with(room.id, period) for b in bookings):
                logger.debug(
                    "Available room found",
                    extra={"room_id": room.id, "period": str(period)},
                )
                return room.id

        logger.info(
            "No room available",
            extra={"period": str(period), "room_count": len(rooms)},
        )
        return NO_ROOM_AVAILABLE

    def get_fully_occupied_dates(self, start_date: date, end_date: date) -> list[date]:
        """全客室が埋まっている日付を昇順で返す

        客室が0件の場合は空リストを返す。過去の期間も指定できる。
        """
        period = DateRange(start=start_date, end=end_date)

        bookings = self._booking_repository.get_all()
        if not bookings:
            return []
        rooms = self._room_repository.get_all()
        if not rooms:
            return []

        # ストアが同じ客室IDを重複して返しても1室として数える
        room_ids = {room.id for room in rooms}
        candidates = [
            b
            for b in bookings
            if b.room_id in room_ids and b.is_active and b.period.overlaps(period)
        ]

        fully_occupied = []
        for day in period.days():
            occupied_rooms = {b.room_id for b in candidates if b.occupies(day)}
            if occupied_rooms == room_ids:
                fully_occupied.append(day)
        return fully_occupied

    def create_booking(self, booking: Booking) -> bool:
        """空室があれば割り当てて予約を保存する

        成功時は引数の booking 自体に客室IDと有効フラグが設定され、
        同じオブジェクトがストアへ渡される。空室が無い場合は何も変更せず False。
        ストアの書き込みが失敗した場合、例外はそのまま伝播し、
        booking への変更は元に戻さない。
        """
        room_id = self.find_available_room(booking.start_date, booking.end_date)
        if room_id == NO_ROOM_AVAILABLE:
            return False

        booking.assign_room(room_id)
        self._booking_repository.add(booking)
        logger.info(
            "Booking created",
            extra={
                "booking_id": booking.id,
                "room_id": room_id,
                "customer_id": booking.customer_id,
                "period": str(booking.period),
            },
        )
        return True
