from smartbus.shared.domain import LocationId
from smartbus.shared.domain.exception import ResourceNotFoundException

LAGOS_LOCATIONS: dict[str, str] = {
    "ikeja": "Ikeja",
    "lagos-island": "Lagos Island",
    "victoria-island": "Victoria Island",
    "ikoyi": "Ikoyi",
    "surulere": "Surulere",
    "yaba": "Yaba",
    "mushin": "Mushin",
    "alaba": "Alaba",
    "ajah": "Ajah",
    "lekki": "Lekki",
    "epe": "Epe",
    "badagry": "Badagry",
    "ikorodu": "Ikorodu",
    "agege": "Agege",
    "oshodi": "Oshodi",
    "festac": "Festac Town",
    "maryland": "Maryland",
    "gbagada": "Gbagada",
}


class LocationDirectory:
    """停留地IDと表示名の対応表"""

    def __init__(self, locations: dict[str, str] | None = None) -> None:
        source = LAGOS_LOCATIONS if locations is None else locations
        self._labels = {LocationId(key): label for key, label in source.items()}

    def __contains__(self, location_id: object) -> bool:
        return location_id in self._labels

    def label(self, location_id: LocationId) -> str:
        """表示名を返す"""
        try:
            return self._labels[location_id]
        except KeyError:
            raise ResourceNotFoundException(
                f"Location not found: {location_id}"
            ) from None

    def require(self, value: str) -> LocationId:
        """文字列を LocationId に変換し、登録済みであることを確認する"""
        location_id = LocationId(value)
        if location_id not in self._labels:
            raise ResourceNotFoundException(f"Location not found: {value}")
        return location_id
