import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class LocationId:
    """停留地ID

    小文字英字とハイフンからなるスラッグ。例: ikeja, victoria-island
    表示名は LocationDirectory が持ち、ドメインでは同一性の判定にのみ使う。
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[a-z]+(-[a-z]+)*$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().lower()
        if not self.PATTERN.match(normalized):
            raise ValueError(f"Invalid location id: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
