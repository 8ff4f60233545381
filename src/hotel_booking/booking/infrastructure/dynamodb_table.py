import os

import boto3
from boto3.dynamodb.conditions import Key


def get_table(table_name: str | None = None):
    """DynamoDB テーブルリソースを取得する

    未指定時は環境変数 TABLE_NAME を使う。
    """
    name = table_name or os.getenv("TABLE_NAME")
    if not name:
        raise ValueError("TABLE_NAME is not configured")
    return boto3.resource("dynamodb").Table(name)


def query_partition(table, pk: str) -> list[dict]:
    """パーティションを LastEvaluatedKey が無くなるまで強整合性で読み切る

    SK の昇順で返る。
    """
    kwargs: dict = {
        "KeyConditionExpression": Key("PK").eq(pk),
        "ConsistentRead": True,
    }
    items: list[dict] = []
    while True:
        response = table.query(**kwargs)
        items.extend(response.get("Items", []))
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key
