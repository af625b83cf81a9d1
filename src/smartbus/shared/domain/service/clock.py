from abc import ABC, abstractmethod
from datetime import datetime, tzinfo


class Clock(ABC):
    """現在時刻の取得元

    料金計算の「出発までの日数」はこのインターフェース経由でのみ現在時刻を読む。
    """

    @abstractmethod
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock(Clock):
    """システム時計を使う Clock の具象実装"""

    def __init__(self, tz: tzinfo | None = None) -> None:
        self._tz = tz

    def now(self) -> datetime:
        return datetime.now(self._tz)
