from unittest.mock import patch

import pytest
from botocore.exceptions import ClientError


@pytest.fixture
def mock_table():
    """boto3 を差し替え、DynamoDB テーブルのモックを返す"""
    with patch(
        "hotel_booking.booking.infrastructure.dynamodb_table.boto3"
    ) as mock_boto3:
        yield mock_boto3.resource.return_value.Table.return_value


@pytest.fixture
def client_error():
    """ClientError を生成する Factory fixture"""

    def _factory(code: str, operation: str = "PutItem") -> ClientError:
        return ClientError({"Error": {"Code": code, "Message": code}}, operation)

    return _factory
