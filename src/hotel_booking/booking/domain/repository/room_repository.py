from abc import abstractmethod

from hotel_booking.booking.domain.entity.room import Room
from hotel_booking.shared.domain import Repository


class RoomRepository(Repository[Room]):
    """客室レポジトリのインターフェース"""

    @abstractmethod
    def get_all(self) -> list[Room]:
        """全客室を列挙順で取得する"""
        raise NotImplementedError

    @abstractmethod
    def add(self, room: Room) -> None:
        """客室を登録する"""
        raise NotImplementedError
