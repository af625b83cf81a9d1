from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ContactInfo:
    """連絡先（確定時に検証する）"""

    email: str = ""
    phone: str = ""

    def updated(self, **changes: object) -> ContactInfo:
        return replace(self, **changes)
