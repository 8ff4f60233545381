from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel_booking.booking.applications.booking_manager import BookingManager
from hotel_booking.booking.domain.entity import Booking
from hotel_booking.booking.handlers.request_models import CreateBookingRequest
from hotel_booking.booking.handlers.response_models import to_booking_response
from hotel_booking.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from hotel_booking.booking.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from hotel_booking.shared.domain import InvalidDateRangeException
from hotel_booking.shared.utils import api_response, error_response

logger = Logger()

manager = BookingManager(
    booking_repository=DynamoDBBookingRepository(),
    room_repository=DynamoDBRoomRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler"""
    logger.info("Received create booking request")

    try:
        request = CreateBookingRequest.model_validate_json(event.body or "{}")
        period = request.to_date_range()
        booking = Booking(
            start_date=period.start,
            end_date=period.end,
            customer_id=request.customer_id,
        )
        created = manager.create_booking(booking)
    except (ValidationError, InvalidDateRangeException) as e:
        logger.warning("Invalid booking request", extra={"error": str(e)})
        return error_response(400, str(e))
    except Exception:
        logger.exception("Failed to create booking")
        return error_response(500, "Internal server error")

    if not created:
        return error_response(409, "No room is available for the requested dates")

    return api_response(201, to_booking_response(booking))
