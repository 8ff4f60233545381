from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Repository 基底クラス

    - エンティティの永続化を抽象化する
    - 読み取りは常に全件スナップショット（フィルタ・ページングなし）
    """

    @abstractmethod
    def get_all(self) -> list[T]:
        """全件を取得する"""
        raise NotImplementedError

    @abstractmethod
    def add(self, item: T) -> None:
        """1件追加する"""
        raise NotImplementedError
