import asyncio
import re
from decimal import Decimal
from typing import Callable

from smartbus.reservation.domain.entity import Confirmation
from smartbus.reservation.domain.enum import Gender
from smartbus.reservation.domain.value_object import (
    BookingDraft,
    BookingId,
    ContactInfo,
    FareBreakdown,
    PassengerDetail,
)
from smartbus.shared.domain import Money
from smartbus.shared.domain.exception import (
    BookingValidationException,
    BusinessRuleViolationException,
    FieldError,
)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_AGE = 1
MAX_AGE = 120


class ReservationFinalizer:
    """予約確定サービス

    - 乗客情報と連絡先を検証し、不正な項目をすべて返す
    - 金額内訳を算出し、最低待ち時間の経過後に Confirmation を生成する
    - 失敗時は何も生成せず、下書きも変更しない
    """

    def __init__(
        self,
        tax_rate: Decimal = Decimal("0.075"),
        service_fee: Decimal = Decimal("100"),
        min_latency_seconds: float = 2.0,
        id_generator: Callable[[], BookingId] = BookingId.generate,
    ) -> None:
        self._tax_rate = tax_rate
        self._service_fee = service_fee
        self._min_latency_seconds = min_latency_seconds
        self._id_generator = id_generator

    def validate(self, draft: BookingDraft) -> list[FieldError]:
        """入力項目を検証し、エラーを項目順に返す（正常なら空リスト）"""
        errors: list[FieldError] = []
        for index, passenger in enumerate(draft.passengers):
            errors.extend(self._validate_passenger(index, passenger))
        errors.extend(self._validate_contact(draft.contact))
        return errors

    def is_valid(self, draft: BookingDraft) -> bool:
        return not self.validate(draft)

    def amount(self, draft: BookingDraft) -> FareBreakdown:
        """下書きから支払金額の内訳を算出する"""
        if draft.quote is None:
            raise BusinessRuleViolationException("A quoted fare is required")
        if len(draft.selection) == 0:
            raise BusinessRuleViolationException("At least one seat must be selected")

        unit_price = draft.quote.final_price
        return FareBreakdown.compute(
            unit_price=unit_price,
            seat_count=len(draft.selection),
            tax_rate=self._tax_rate,
            fee=Money(amount=self._service_fee, currency=unit_price.currency),
        )

    async def finalize(self, draft: BookingDraft) -> Confirmation:
        """予約を確定する

        Raises:
            BusinessRuleViolationException: 便・見積・座席が揃っていない場合
            BookingValidationException: 乗客情報・連絡先に不正な項目がある場合
        """
        if draft.trip is None:
            raise BusinessRuleViolationException("A trip must be chosen")
        if len(draft.passengers) != len(draft.selection):
            raise BusinessRuleViolationException(
                "Each selected seat must have exactly one passenger"
            )

        breakdown = self.amount(draft)

        errors = self.validate(draft)
        if errors:
            raise BookingValidationException(errors)

        await asyncio.sleep(self._min_latency_seconds)

        return Confirmation(
            booking_id=self._id_generator(),
            draft=draft,
            breakdown=breakdown,
        )

    def _validate_passenger(
        self, index: int, passenger: PassengerDetail
    ) -> list[FieldError]:
        prefix = f"passengers[{index}]"
        errors = []
        if not isinstance(passenger.name, str) or not passenger.name.strip():
            errors.append(FieldError(f"{prefix}.name", "Name is required"))
        if passenger.age is None:
            errors.append(FieldError(f"{prefix}.age", "Age is required"))
        elif not isinstance(passenger.age, int) or isinstance(passenger.age, bool):
            errors.append(FieldError(f"{prefix}.age", "Age must be a whole number"))
        elif not MIN_AGE <= passenger.age <= MAX_AGE:
            errors.append(
                FieldError(
                    f"{prefix}.age", f"Age must be between {MIN_AGE} and {MAX_AGE}"
                )
            )
        if passenger.gender is None:
            errors.append(FieldError(f"{prefix}.gender", "Gender is required"))
        elif not isinstance(passenger.gender, Gender):
            choices = ", ".join(gender.value for gender in Gender)
            errors.append(
                FieldError(f"{prefix}.gender", f"Gender must be one of: {choices}")
            )
        return errors

    def _validate_contact(self, contact: ContactInfo) -> list[FieldError]:
        errors = []
        email = contact.email.strip() if isinstance(contact.email, str) else ""
        if not email:
            errors.append(FieldError("contact.email", "Email is required"))
        elif not EMAIL_PATTERN.match(email):
            errors.append(FieldError("contact.email", "Email format is invalid"))
        phone = contact.phone.strip() if isinstance(contact.phone, str) else ""
        if not phone:
            errors.append(FieldError("contact.phone", "Phone is required"))
        return errors
