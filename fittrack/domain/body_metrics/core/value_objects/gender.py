"""Gender value object - selects the Mifflin-St Jeor constant."""

from enum import Enum


class Gender(str, Enum):
    """Binary gender branch of the BMR formula.

    Only "male" selects the +5 constant; every other value selects the
    -161 branch. No third category is modelled.
    """

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def from_raw(cls, raw: object) -> "Gender":
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str) and raw.strip().lower() == cls.MALE.value:
            return cls.MALE
        return cls.FEMALE

    def bmr_constant(self) -> float:
        """Sex-specific adjustment added to the base BMR."""
        if self is Gender.MALE:
            return 5.0
        return -161.0
