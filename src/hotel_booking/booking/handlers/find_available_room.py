from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel_booking.booking.applications.booking_manager import BookingManager
from hotel_booking.booking.handlers.request_models import DateRangeRequest
from hotel_booking.booking.handlers.response_models import (
    to_available_room_response,
)
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
    """空室検索 Lambda Handler"""
    logger.info("Received find available room request")

    try:
        request = DateRangeRequest.model_validate(event.query_string_parameters or {})
        period = request.to_date_range()
        room_id = manager.find_available_room(period.start, period.end)
    except (ValidationError, InvalidDateRangeException) as e:
        logger.warning("Invalid date range", extra={"error": str(e)})
        return error_response(400, str(e))
    except Exception:
        logger.exception("Failed to find available room")
        return error_response(500, "Internal server error")

    return api_response(200, to_available_room_response(room_id, period.start, period.end))
