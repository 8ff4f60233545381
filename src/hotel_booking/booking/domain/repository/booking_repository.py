from abc import abstractmethod

from hotel_booking.booking.domain.entity.booking import Booking
from hotel_booking.shared.domain import Repository


class BookingRepository(Repository[Booking]):
    """予約レポジトリのインターフェース"""

    @abstractmethod
    def get_all(self) -> list[Booking]:
        """全予約を取得する"""
        raise NotImplementedError

    @abstractmethod
    def add(self, booking: Booking) -> None:
        """予約を保存する

        ID 未採番の予約にはストア側で ID を採番する。
        """
        raise NotImplementedError
