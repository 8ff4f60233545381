class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class InvalidDateRangeException(DomainException):
    """日付範囲が不正な場合（開始日 > 終了日、開始日が未来でない等）

    呼び出し元の入力エラーであり、リトライしない。
    """

    pass
