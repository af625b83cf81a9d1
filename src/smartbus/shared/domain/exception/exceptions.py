from dataclasses import dataclass


class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class InvalidTransitionException(DomainException):
    """現在のステップから許可されていない遷移を要求した場合"""

    pass


class SubmissionInProgressException(DomainException):
    """予約確定処理が実行中に再送信された場合"""

    pass


@dataclass(frozen=True)
class FieldError:
    """入力項目ごとのエラー"""

    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class BookingValidationException(DomainException):
    """予約確定時の入力検証エラー

    最初の 1 件ではなく、不正な項目をすべて保持する。
    """

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = list(errors)
        fields = ", ".join(error.field for error in self.errors)
        super().__init__(f"Invalid booking fields: {fields}")

    @property
    def fields(self) -> set[str]:
        return {error.field for error in self.errors}
