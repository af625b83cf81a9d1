from smartbus.reservation.domain.value_object import (
    BookingDraft,
    BookingId,
    FareBreakdown,
)
from smartbus.shared.domain import Entity, Money


class Confirmation(Entity[BookingId]):
    """予約確定エンティティ

    確定時点の下書きと金額内訳のスナップショット。生成後は変更できない。
    """

    def __init__(
        self,
        booking_id: BookingId,
        draft: BookingDraft,
        breakdown: FareBreakdown,
    ) -> None:
        super().__init__(booking_id)
        self._draft = draft
        self._breakdown = breakdown

    @property
    def booking_id(self) -> BookingId:
        return self.id

    @property
    def draft(self) -> BookingDraft:
        return self._draft

    @property
    def breakdown(self) -> FareBreakdown:
        return self._breakdown

    @property
    def total_amount(self) -> Money:
        return self._breakdown.total
