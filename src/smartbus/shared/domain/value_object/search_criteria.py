from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import ClassVar

from .location_id import LocationId


@dataclass(frozen=True)
class SearchCriteria:
    """検索条件

    検索前は未入力の項目を許容し、is_complete で揃っているかを判定する。
    検索後は BookingDraft に固定され、変更されない。
    """

    MAX_PASSENGERS: ClassVar[int] = 6

    origin: LocationId | None = None
    destination: LocationId | None = None
    travel_date: date | None = None
    passenger_count: int = 1

    def __post_init__(self) -> None:
        if not 1 <= self.passenger_count <= self.MAX_PASSENGERS:
            raise ValueError(
                f"Passenger count must be between 1 and {self.MAX_PASSENGERS}"
            )

    @property
    def is_complete(self) -> bool:
        return (
            self.origin is not None
            and self.destination is not None
            and self.travel_date is not None
        )

    def missing_fields(self) -> list[str]:
        """未入力の項目名を返す"""
        return [
            name
            for name in ("origin", "destination", "travel_date")
            if getattr(self, name) is None
        ]

    def updated(self, **changes: object) -> SearchCriteria:
        """一部の項目を差し替えた新しい検索条件を返す"""
        return replace(self, **changes)
