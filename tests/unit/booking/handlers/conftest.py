import importlib
import json
from dataclasses import dataclass
from unittest.mock import patch

import pytest

from hotel_booking.booking.applications.booking_manager import BookingManager
from hotel_booking.booking.domain.entity import Room
from hotel_booking.booking.infrastructure.in_memory_repository import (
    InMemoryBookingRepository,
    InMemoryRoomRepository,
)


@dataclass
class FakeLambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
    aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def stores():
    """ハンドラに差し込むインメモリストア（客室2室）"""
    return (
        InMemoryBookingRepository(),
        InMemoryRoomRepository([Room(id=1), Room(id=2)]),
    )


@pytest.fixture
def load_handler(monkeypatch, stores, today):
    """boto3 を差し替えてハンドラモジュールを読み込み、manager をインメモリ版に置き換える"""
    monkeypatch.setenv("TABLE_NAME", "test-table")
    monkeypatch.setenv("POWERTOOLS_SERVICE_NAME", "hotel-booking-test")

    def _load(module_name: str):
        with patch("hotel_booking.booking.infrastructure.dynamodb_table.boto3"):
            module = importlib.import_module(
                f"hotel_booking.booking.handlers.{module_name}"
            )
        booking_repository, room_repository = stores
        monkeypatch.setattr(
            module,
            "manager",
            BookingManager(booking_repository, room_repository, today=lambda: today),
        )
        return module

    return _load


@pytest.fixture
def api_event():
    """API Gateway HTTP API (v2) のイベントを生成する"""

    def _factory(query: dict | None = None, body: dict | str | None = None) -> dict:
        if isinstance(body, dict):
            body = json.dumps(body)
        return {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": "/",
            "rawQueryString": "",
            "queryStringParameters": query,
            "requestContext": {"http": {"method": "GET", "path": "/"}},
            "body": body,
            "isBase64Encoded": False,
        }

    return _factory
