from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceClass:
    """車両クラス

    運行会社が付ける自由記述の名称。例: "AC Standard", "AC Premium", "Executive"
    料金計算では名称に含まれるキーワードでクラスを判定する。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Service class cannot be empty")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value

    @property
    def is_executive(self) -> bool:
        return "Executive" in self.value

    @property
    def is_premium(self) -> bool:
        return "Premium" in self.value
