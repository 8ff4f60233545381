from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from hotel_booking.booking.domain.entity import Room
from hotel_booking.booking.domain.repository import RoomRepository
from hotel_booking.booking.infrastructure.dynamodb_table import get_table, query_partition
from hotel_booking.shared.domain import DuplicateResourceException

ROOMS_PARTITION = "ROOMS"


class DynamoDBRoomRepository(RoomRepository):
    """DynamoDBを使用したRoomRepository の具象実装

    客室は SK (ゼロ埋めした客室ID) の昇順で列挙される。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table = get_table(table_name)

    def get_all(self) -> list[Room]:
        items = query_partition(self.table, ROOMS_PARTITION)
        return [self._to_entity(item) for item in items]

    def add(self, room: Room) -> None:
        item = {
            "PK": ROOMS_PARTITION,
            "SK": f"ROOM#{room.id:010d}",
            "entity_type": "ROOM",
            "room_id": room.id,
            "description": room.description,
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(f"Room already exists: {room.id}") from e
            raise

    def _to_entity(self, item: dict) -> Room:
        return Room(id=int(item["room_id"]), description=item.get("description", ""))
