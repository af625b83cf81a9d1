import asyncio
from decimal import Decimal

import pytest

from smartbus.reservation.domain import (
    BookingId,
    Confirmation,
    ContactInfo,
    Gender,
    PassengerDetail,
    ReservationFinalizer,
)
from smartbus.shared.domain import Money
from smartbus.shared.domain.exception import (
    BookingValidationException,
    BusinessRuleViolationException,
)


class TestReservationFinalizerValidate:
    """ReservationFinalizer.validate のテスト"""

    def test_complete_draft_has_no_errors(self, finalizer, create_draft):
        assert finalizer.validate(create_draft()) == []

    def test_reports_every_invalid_field(self, finalizer, create_draft):
        """最初の 1 件ではなく、不正な項目をすべて返す"""
        draft = create_draft(
            seats=("A1", "A2", "A3"),
            passengers=(
                PassengerDetail(name="Ada", age=30, gender=Gender.FEMALE),
                PassengerDetail(name="  ", age=0, gender=None),
                PassengerDetail(name="Tunde", age=None, gender=Gender.MALE),
            ),
            contact=ContactInfo(email="not-an-email", phone=""),
        )

        errors = finalizer.validate(draft)

        assert [error.field for error in errors] == [
            "passengers[1].name",
            "passengers[1].age",
            "passengers[1].gender",
            "passengers[2].age",
            "contact.email",
            "contact.phone",
        ]

    @pytest.mark.parametrize("age, valid", [(1, True), (120, True), (0, False), (121, False)])
    def test_age_bounds(self, finalizer, create_draft, age, valid):
        draft = create_draft(
            seats=("A1",),
            passengers=(PassengerDetail(name="Ada", age=age, gender=Gender.OTHER),),
        )
        assert finalizer.is_valid(draft) is valid

    @pytest.mark.parametrize(
        "email, valid",
        [
            ("ada@example.com", True),
            ("ada.obi@mail.example.ng", True),
            ("", False),
            ("ada@", False),
            ("ada example@mail.com", False),
            ("@example.com", False),
        ],
    )
    def test_email_shape(self, finalizer, create_draft, email, valid):
        draft = create_draft(contact=ContactInfo(email=email, phone="08012345678"))
        assert finalizer.is_valid(draft) is valid

    @pytest.mark.parametrize(
        "passenger, field, message",
        [
            (
                PassengerDetail(name="Ada", age=30, gender="alien"),
                "passengers[0].gender",
                "Gender must be one of: male, female, other",
            ),
            (
                PassengerDetail(name="Ada", age=30, gender="female"),
                "passengers[0].gender",
                "Gender must be one of",
            ),
            (
                PassengerDetail(name="Ada", age=True, gender=Gender.FEMALE),
                "passengers[0].age",
                "Age must be a whole number",
            ),
            (
                PassengerDetail(name="Ada", age=30.5, gender=Gender.FEMALE),
                "passengers[0].age",
                "Age must be a whole number",
            ),
            (
                PassengerDetail(name="Ada", age="30", gender=Gender.FEMALE),
                "passengers[0].age",
                "Age must be a whole number",
            ),
            (
                PassengerDetail(name=None, age=30, gender=Gender.FEMALE),
                "passengers[0].name",
                "Name is required",
            ),
        ],
    )
    def test_values_outside_allowed_set_are_reported(
        self, finalizer, create_draft, passenger, field, message
    ):
        """型や選択肢が不正な値も FieldError として返す"""
        draft = create_draft(seats=("A1",), passengers=(passenger,))

        errors = finalizer.validate(draft)

        assert [error.field for error in errors] == [field]
        assert errors[0].message.startswith(message)


class TestReservationFinalizerFinalize:
    """ReservationFinalizer.finalize のテスト"""

    def test_finalize_returns_confirmation(self, finalizer, create_draft):
        draft = create_draft()

        confirmation = asyncio.run(finalizer.finalize(draft))

        assert isinstance(confirmation, Confirmation)
        assert confirmation.booking_id == BookingId("LG0123456789AB")
        assert confirmation.draft is draft
        assert confirmation.breakdown.subtotal == Money.ngn(1786)
        assert confirmation.breakdown.tax == Money.ngn(134)
        assert confirmation.total_amount == Money.ngn(2020)

    def test_total_can_be_derived_again_from_draft(self, finalizer, create_draft):
        """保存された下書きから再計算しても合計は変わらない"""
        confirmation = asyncio.run(finalizer.finalize(create_draft()))
        assert finalizer.amount(confirmation.draft).total == confirmation.total_amount

    def test_invalid_draft_raises_with_all_fields(self, finalizer, create_draft):
        draft = create_draft(
            passengers=(PassengerDetail(), PassengerDetail(name="Ada", age=30, gender=Gender.FEMALE)),
            contact=ContactInfo(),
        )

        with pytest.raises(BookingValidationException) as exc_info:
            asyncio.run(finalizer.finalize(draft))

        assert exc_info.value.fields == {
            "passengers[0].name",
            "passengers[0].age",
            "passengers[0].gender",
            "contact.email",
            "contact.phone",
        }

    def test_passenger_count_must_match_seats(self, finalizer, create_draft):
        draft = create_draft(
            passengers=(PassengerDetail(name="Ada", age=30, gender=Gender.FEMALE),)
        )

        with pytest.raises(BusinessRuleViolationException, match="exactly one passenger"):
            asyncio.run(finalizer.finalize(draft))

    def test_uses_configured_tax_and_fee(self, create_draft):
        finalizer = ReservationFinalizer(
            tax_rate=Decimal("0.1"),
            service_fee=Decimal("0"),
            min_latency_seconds=0,
        )

        confirmation = asyncio.run(finalizer.finalize(create_draft(seats=("A1",))))

        # 893 + 89.3 -> 893 + 89
        assert confirmation.total_amount == Money.ngn(982)
        assert BookingId.PATTERN.match(str(confirmation.booking_id))
