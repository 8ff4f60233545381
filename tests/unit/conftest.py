from datetime import date

import pytest


@pytest.fixture
def today():
    """全テスト共通の「本日」"""
    return date(2024, 6, 1)
