from hotel_booking.shared.domain import Entity


class Room(Entity[int]):
    """客室エンティティ(読み取り専用)"""

    def __init__(self, id: int, description: str = "") -> None:
        super().__init__(id)
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    def __repr__(self) -> str:
        return f"Room(id={self.id!r}, description={self._description!r})"
