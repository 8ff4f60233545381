import os

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = "hotel-booking"


def get_logger(service_name: str | None = None) -> Logger:
    """サービス名付きの構造化ロガーを取得する

    未指定時は POWERTOOLS_SERVICE_NAME、それも無ければ既定のサービス名を使う。
    """
    return Logger(
        service=service_name
        or os.getenv("POWERTOOLS_SERVICE_NAME", DEFAULT_SERVICE_NAME)
    )
