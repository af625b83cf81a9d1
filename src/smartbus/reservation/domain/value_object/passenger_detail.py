from __future__ import annotations

from dataclasses import dataclass, replace

from smartbus.reservation.domain.enum import Gender


@dataclass(frozen=True)
class PassengerDetail:
    """乗客情報

    入力途中の状態を保持するため、構築時には検証しない。
    検証は ReservationFinalizer が確定時にまとめて行う。
    """

    name: str = ""
    age: int | None = None
    gender: Gender | None = None

    def updated(self, **changes: object) -> PassengerDetail:
        return replace(self, **changes)
