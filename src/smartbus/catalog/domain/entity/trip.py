from smartbus.catalog.domain.value_object import ServiceClass
from smartbus.shared.domain import ClockTime, Entity, Money, TripId
from smartbus.shared.domain.exception import BusinessRuleViolationException


class Trip(Entity[TripId]):
    """便エンティティ

    TripCatalog から供給される読み取り専用のデータ。
    予約処理の中で変更されることはない。
    """

    def __init__(
        self,
        id: TripId,
        operator_name: str,
        departure_time: ClockTime,
        arrival_time: ClockTime,
        duration_minutes: int,
        service_class: ServiceClass,
        base_fare: Money,
        seats_available: int,
        rating: float,
        amenities: frozenset[str] = frozenset(),
    ) -> None:
        super().__init__(id)

        self._operator_name = operator_name
        self._departure_time = departure_time
        self._arrival_time = arrival_time
        self._duration_minutes = duration_minutes
        self._service_class = service_class
        self._base_fare = base_fare
        self._seats_available = seats_available
        self._rating = rating
        self._amenities = frozenset(amenities)

        self._validate()

    def _validate(self) -> None:
        if not self._operator_name.strip():
            raise BusinessRuleViolationException("Operator name cannot be empty")
        if not self._base_fare.is_positive():
            raise BusinessRuleViolationException("Base fare must be greater than zero")
        if self._seats_available < 0:
            raise BusinessRuleViolationException("Seats available cannot be negative")
        if not 0 <= self._rating <= 5:
            raise BusinessRuleViolationException("Rating must be between 0 and 5")
        if self._duration_minutes <= 0:
            raise BusinessRuleViolationException("Duration must be greater than zero")

    @property
    def operator_name(self) -> str:
        return self._operator_name

    @property
    def departure_time(self) -> ClockTime:
        return self._departure_time

    @property
    def arrival_time(self) -> ClockTime:
        return self._arrival_time

    @property
    def duration_minutes(self) -> int:
        return self._duration_minutes

    @property
    def service_class(self) -> ServiceClass:
        return self._service_class

    @property
    def base_fare(self) -> Money:
        return self._base_fare

    @property
    def seats_available(self) -> int:
        return self._seats_available

    @property
    def rating(self) -> float:
        return self._rating

    @property
    def amenities(self) -> frozenset[str]:
        return self._amenities

    def duration_label(self) -> str:
        """所要時間の表示用文字列（例: 1h 30m）"""
        hours, minutes = divmod(self._duration_minutes, 60)
        return f"{hours}h {minutes}m"
