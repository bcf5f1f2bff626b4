"""Validator - reusable predicates over raw form input.

Raw values arrive as whatever the UI collected: strings (possibly empty
or whitespace), numbers, or None. Every numeric predicate goes through
``parse_float`` so the parse-then-check pattern lives in one place.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional, Union

from .errors import ErrorKind, ValidationFailure

RawValue = Union[str, int, float, None]

# Longest numeric prefix, after leading whitespace: "12.5kg" -> 12.5
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)

# Message templates keyed by failure kind (raw UI keys and ErrorKind values)
_MESSAGES = {
    "empty": "Please enter {field}",
    "negative": "{field} must be a positive number",
    "nonNumeric": "Please enter a valid number for {field}",
    "outOfRange": "{field} is out of valid range",
}

_KIND_KEYS = {
    ErrorKind.EMPTY_INPUT: "empty",
    ErrorKind.NEGATIVE_OR_ZERO_INPUT: "negative",
    ErrorKind.NON_NUMERIC_INPUT: "nonNumeric",
    ErrorKind.OUT_OF_RANGE_INPUT: "outOfRange",
}


def parse_float(value: RawValue) -> Optional[float]:
    """Parse a raw value as a float.

    Strings are parsed by their longest leading numeric prefix, so
    ``"10 kg"`` parses as 10.0 and ``"abc"`` does not parse. Booleans,
    None and other types never parse. NaN is treated as a failed parse;
    integers beyond float range become signed infinity.

    Returns:
        float or None: Parsed value, None when parsing fails
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            number = math.inf if value > 0 else -math.inf
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value.lstrip())
        if match is None:
            return None
        text = match.group(0).replace("Infinity", "inf")
        number = float(text)
    else:
        return None
    if math.isnan(number):
        return None
    return number


def is_blank(value: RawValue) -> bool:
    """True for None and for strings that are empty after trimming."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a group of inputs.

    Attributes:
        error: First failure encountered, None when valid
        warning: Non-blocking advisory message
    """

    error: Optional[ValidationFailure] = None
    warning: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, warning: Optional[str] = None) -> "ValidationResult":
        return cls(error=None, warning=warning)

    @classmethod
    def fail(
        cls, kind: ErrorKind, message: str, field: Optional[str] = None
    ) -> "ValidationResult":
        return cls(error=ValidationFailure(kind=kind, message=message, field=field))


class Validator:
    """Stateless predicate library for form input validation.

    Constructed explicitly and handed to each component that needs it.
    """

    def is_positive_number(self, value: RawValue) -> bool:
        """True if value parses as a number strictly greater than zero."""
        number = parse_float(value)
        return number is not None and number > 0

    def is_in_range(self, value: RawValue, min_value: float, max_value: float) -> bool:
        """True if value parses and lies within [min_value, max_value]."""
        number = parse_float(value)
        return number is not None and min_value <= number <= max_value

    def is_integer(self, value: RawValue) -> bool:
        """True if value parses to a finite number without fractional part."""
        number = parse_float(value)
        return number is not None and math.isfinite(number) and number.is_integer()

    def is_not_empty(self, value: RawValue) -> bool:
        """True only for strings with at least one non-whitespace character."""
        return isinstance(value, str) and len(value.strip()) > 0

    def has_valid_length(self, value: RawValue, min_length: int, max_length: int) -> bool:
        """True if value is a string whose trimmed length is within bounds."""
        if not isinstance(value, str):
            return False
        length = len(value.strip())
        return min_length <= length <= max_length

    def is_valid_age(self, age: RawValue) -> bool:
        return self.is_positive_number(age) and self.is_in_range(age, 1, 150)

    def is_valid_weight(self, weight: RawValue) -> bool:
        return self.is_positive_number(weight) and self.is_in_range(weight, 1, 500)

    def is_valid_height(self, height: RawValue) -> bool:
        return self.is_positive_number(height) and self.is_in_range(height, 1, 300)

    def get_error_message(self, kind: Union[str, ErrorKind], field_name: str) -> str:
        """Look up the display message for a validation failure.

        Args:
            kind: "empty", "negative", "nonNumeric", "outOfRange" or the
                matching ErrorKind
            field_name: Name interpolated into the sentence

        Returns:
            str: Message, or "Invalid input" for unknown kinds
        """
        if isinstance(kind, ErrorKind):
            key = _KIND_KEYS.get(kind)
        else:
            key = kind
        template = _MESSAGES.get(key) if key else None
        if template is None:
            return "Invalid input"
        return template.format(field=field_name)
