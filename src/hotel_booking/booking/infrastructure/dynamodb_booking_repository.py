from datetime import date

from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from hotel_booking.booking.domain.entity import Booking
from hotel_booking.booking.domain.repository import BookingRepository
from hotel_booking.booking.infrastructure.dynamodb_table import get_table, query_partition
from hotel_booking.shared.domain import DuplicateResourceException

BOOKINGS_PARTITION = "BOOKINGS"


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table = get_table(table_name)

    def get_all(self) -> list[Booking]:
        """全予約を取得する"""
        items = query_partition(self.table, BOOKINGS_PARTITION)
        return [self._to_entity(item) for item in items]

    def add(self, booking: Booking) -> None:
        """予約をDBに保存する"""
        if booking.id is None:
            booking.assign_id(self._next_id())

        item = {
            "PK": BOOKINGS_PARTITION,
            "SK": f"BOOKING#{booking.id:010d}",
            "entity_type": "BOOKING",
            "booking_id": booking.id,
            "start_date": booking.start_date.isoformat(),
            "end_date": booking.end_date.isoformat(),
            "customer_id": booking.customer_id,
            "room_id": booking.room_id,
            "is_active": booking.is_active,
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Booking already exists: {booking.id}"
                ) from e
            raise

    def _next_id(self) -> int:
        """アトミックカウンタで予約IDを採番する"""
        response = self.table.update_item(
            Key={"PK": "COUNTER", "SK": "BOOKING"},
            UpdateExpression="ADD #value :one",
            ExpressionAttributeNames={"#value": "value"},
            ExpressionAttributeValues={":one": 1},
            ReturnValues="UPDATED_NEW",
        )
        return int(response["Attributes"]["value"])

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=int(item["booking_id"]),
            start_date=date.fromisoformat(item["start_date"]),
            end_date=date.fromisoformat(item["end_date"]),
            customer_id=int(item["customer_id"]),
            room_id=int(item["room_id"]),
            is_active=bool(item["is_active"]),
        )
