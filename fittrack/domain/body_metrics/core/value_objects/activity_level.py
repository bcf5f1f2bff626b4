"""ActivityLevel value object - physical activity level for maintenance calories."""

from enum import Enum

import structlog

logger = structlog.get_logger(__name__)


class ActivityLevel(str, Enum):
    """Physical activity level used to scale BMR.

    - SEDENTARY: Little or no exercise, desk job
    - LIGHTLY_ACTIVE: Light exercise 1-3 days/week
    - MODERATELY_ACTIVE: Moderate exercise 3-5 days/week
    - VERY_ACTIVE: Hard exercise 6-7 days/week
    - EXTRA_ACTIVE: Very hard exercise, physical job or twice-daily training
    """

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"

    @classmethod
    def from_key(cls, key: object) -> "ActivityLevel":
        """Resolve an activity key, falling back to SEDENTARY.

        Unrecognised keys are accepted leniently and treated as the lowest
        activity level instead of failing the calculation.

        Example:
            >>> ActivityLevel.from_key("very_active")
            <ActivityLevel.VERY_ACTIVE: 'very_active'>
            >>> ActivityLevel.from_key("couch")
            <ActivityLevel.SEDENTARY: 'sedentary'>
        """
        if isinstance(key, cls):
            return key
        if isinstance(key, str):
            try:
                return cls(key.strip().lower())
            except ValueError:
                pass
        logger.debug("Unknown activity level, using sedentary", key=key)
        return cls.SEDENTARY

    def multiplier(self) -> float:
        """BMR multiplier for this activity level.

        Example:
            >>> ActivityLevel.MODERATELY_ACTIVE.multiplier()
            1.55
        """
        multipliers = {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHTLY_ACTIVE: 1.375,
            ActivityLevel.MODERATELY_ACTIVE: 1.55,
            ActivityLevel.VERY_ACTIVE: 1.725,
            ActivityLevel.EXTRA_ACTIVE: 1.9,
        }
        return multipliers[self]
