"""
Product validation rules.

Pure functions over a candidate payload. Every rule runs independently and
all violations are collected in order; nothing here raises on malformed input.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from core.domain.value_objects import Category

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 1000
PRICE_MAX = 2**63 - 1
QUANTITY_MAX = 2**31 - 1

WRITABLE_FIELDS = ("name", "description", "price", "quantity", "category")

_MISSING = object()

Number = Union[int, float]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a product payload."""

    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when no rule was violated."""
        return not self.errors


def to_number(value: Any) -> Optional[Number]:
    """
    Coerce a JSON value to a number.

    Accepts ints, finite floats and numeric strings. Booleans and anything
    else yield None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError:
            return None
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    return None


def _is_integral(number: Number) -> bool:
    return isinstance(number, int) or number.is_integer()


def validate_name(value: Any) -> List[str]:
    """Name: present, trimmed length within bounds."""
    if value is _MISSING or value is None or (isinstance(value, str) and not value.strip()):
        return ["Product name is required"]
    if not isinstance(value, str):
        return ["Name must be a string"]
    length = len(value.strip())
    if length < NAME_MIN_LENGTH:
        return [f"Name must be at least {NAME_MIN_LENGTH} characters"]
    if length > NAME_MAX_LENGTH:
        return [f"Name cannot exceed {NAME_MAX_LENGTH} characters"]
    return []


def validate_description(value: Any) -> List[str]:
    """Description: present, length within bounds."""
    if value is _MISSING or value is None or value == "":
        return ["Product description is required"]
    if not isinstance(value, str):
        return ["Description must be a string"]
    if len(value) < DESCRIPTION_MIN_LENGTH:
        return [f"Description must be at least {DESCRIPTION_MIN_LENGTH} characters"]
    if len(value) > DESCRIPTION_MAX_LENGTH:
        return [f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"]
    return []


def validate_price(value: Any) -> List[str]:
    """Price: present, numeric, non-negative, integral."""
    if value is _MISSING or value is None or value == "":
        return ["Product price is required"]
    number = to_number(value)
    if number is None:
        return ["Price must be a number"]
    errors = []
    if number < 0:
        errors.append("Price cannot be negative")
    if not _is_integral(number):
        errors.append("Price must be an integer")
    if number > PRICE_MAX:
        errors.append(f"Price cannot exceed {PRICE_MAX}")
    return errors


def validate_quantity(value: Any) -> List[str]:
    """Quantity: optional; when given, numeric, non-negative, integral."""
    if value is _MISSING or value is None:
        return []
    number = to_number(value)
    if number is None:
        return ["Quantity must be a number"]
    errors = []
    if number < 0:
        errors.append("Quantity cannot be negative")
    if not _is_integral(number):
        errors.append("Quantity must be an integer")
    if number > QUANTITY_MAX:
        errors.append(f"Quantity cannot exceed {QUANTITY_MAX}")
    return errors


def validate_category(value: Any) -> List[str]:
    """Category: present and a member of the closed set."""
    if value is _MISSING or value is None or (isinstance(value, str) and not value.strip()):
        return ["Product category is required"]
    if not isinstance(value, str) or not Category.is_valid(value.strip()):
        return ["Invalid category. Must be one of: " + ", ".join(Category.values())]
    return []


_RULES = (
    ("name", validate_name),
    ("description", validate_description),
    ("price", validate_price),
    ("quantity", validate_quantity),
    ("category", validate_category),
)


def validate_product(payload: Any, partial: bool = False) -> ValidationResult:
    """
    Validate a candidate product payload.

    Args:
        payload: Mapping of field name to raw value
        partial: When True (updates), absent fields are not checked

    Returns:
        ValidationResult with every violation, in field order
    """
    if not isinstance(payload, Mapping):
        return ValidationResult(["Request body must be a JSON object"])

    errors: List[str] = []
    for field_name, rule in _RULES:
        value = payload.get(field_name, _MISSING)
        if partial and value is _MISSING:
            continue
        errors.extend(rule(value))
    return ValidationResult(errors)


def clean_product_payload(payload: Mapping, partial: bool = False) -> Dict[str, Any]:
    """
    Normalise a payload that passed validate_product.

    Keeps only writable fields, trims name and category and converts
    numbers to int. Client-supplied id, inStock, timestamps and unknown
    keys are dropped.
    """
    cleaned: Dict[str, Any] = {}
    for field_name in WRITABLE_FIELDS:
        if field_name not in payload:
            continue
        value = payload[field_name]
        if field_name == "quantity" and value is None:
            continue
        if field_name in ("name", "category"):
            value = value.strip()
        elif field_name in ("price", "quantity"):
            value = int(to_number(value))
        cleaned[field_name] = value

    if not partial:
        cleaned.setdefault("quantity", 0)
    return cleaned
