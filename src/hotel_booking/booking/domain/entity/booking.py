from datetime import date

from hotel_booking.shared.domain import DateRange, Entity
from hotel_booking.shared.domain.exception import BusinessRuleViolationException

# 空室なしを表す番兵値。有効な客室IDは 0 以上
NO_ROOM_AVAILABLE = -1


class Booking(Entity[int | None]):
    """予約エンティティ

    - 有効 (is_active) な予約のみが客室を占有する
    - 占有期間は開始日・終了日を含む
    """

    def __init__(
        self,
        start_date: date,
        end_date: date,
        customer_id: int,
        id: int | None = None,
        room_id: int = NO_ROOM_AVAILABLE,
        is_active: bool = False,
    ) -> None:
        super().__init__(id)
        self._period = DateRange(start=start_date, end=end_date)
        self._customer_id = customer_id
        self._room_id = room_id
        self._is_active = is_active

    @property
    def start_date(self) -> date:
        return self._period.start

    @property
    def end_date(self) -> date:
        return self._period.end

    @property
    def period(self) -> DateRange:
        return self._period

    @property
    def customer_id(self) -> int:
        return self._customer_id

    @property
    def room_id(self) -> int:
        return self._room_id

    @property
    def is_active(self) -> bool:
        return self._is_active

    def assign_id(self, booking_id: int) -> None:
        """ストアが採番したIDを設定する"""
        if self._id is not None:
            raise BusinessRuleViolationException(
                f"Booking already has an id: {self._id}"
            )
        self._id = booking_id

    def assign_room(self, room_id: int) -> None:
        """客室を割り当てて予約を有効化する"""
        if room_id < 0:
            raise BusinessRuleViolationException(f"Invalid room id: {room_id}")
        self._room_id = room_id
        self._is_active = True

    def occupies(self, day: date) -> bool:
        """指定日に客室を占有しているかどうか"""
        return self._is_active and self._period.contains(day)

    def conflicts_with(self, room_id: int, period: DateRange) -> bool:
        """指定客室・期間と重複する有効な予約かどうか"""
        return (
            self._is_active
            and self._room_id == room_id
            and self._period.overlaps(period)
        )

    def __repr__(self) -> str:
        return (
            f"Booking(id={self.id!r}, period={self._period}, "
            f"room_id={self._room_id!r}, is_active={self._is_active!r}, "
            f"customer_id={self._customer_id!r})"
        )
