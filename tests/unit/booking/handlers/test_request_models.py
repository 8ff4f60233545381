from datetime import date

import pytest
from pydantic import ValidationError

from hotel_booking.booking.handlers.request_models import (
    CreateBookingRequest,
    DateRangeRequest,
)
from hotel_booking.shared.domain import InvalidDateRangeException


class TestDateRangeRequest:
    def test_valid_request(self):
        request = DateRangeRequest.model_validate(
            {"start_date": "2024-01-01", "end_date": "2024-01-03"}
        )
        period = request.to_date_range()
        assert period.start == date(2024, 1, 1)
        assert period.end == date(2024, 1, 3)

    @pytest.mark.parametrize("value", ["2024/01/01", "20240101", ""])
    def test_invalid_date_format_raises_error(self, value):
        with pytest.raises(ValidationError):
            DateRangeRequest.model_validate({"start_date": value, "end_date": "2024-01-03"})

    def test_missing_end_date_raises_error(self):
        with pytest.raises(ValidationError):
            DateRangeRequest.model_validate({"start_date": "2024-01-01"})

    def test_reversed_range_raises_domain_error(self):
        request = DateRangeRequest(start_date="2024-01-05", end_date="2024-01-01")
        with pytest.raises(InvalidDateRangeException):
            request.to_date_range()


class TestCreateBookingRequest:
    def test_valid_request_from_json(self):
        request = CreateBookingRequest.model_validate_json(
            '{"start_date": "2024-01-01", "end_date": "2024-01-03", "customer_id": 7}'
        )
        assert request.customer_id == 7

    def test_negative_customer_id_raises_error(self):
        with pytest.raises(ValidationError):
            CreateBookingRequest(start_date="2024-01-01", end_date="2024-01-03", customer_id=-1)

    def test_invalid_json_raises_error(self):
        with pytest.raises(ValidationError):
            CreateBookingRequest.model_validate_json("not json")
