from enum import Enum


class Gender(str, Enum):
    """乗客の性別"""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
