"""
Shared schema building blocks.

Monetary amounts travel as fixed‑point strings with two fraction
digits (``"25000.00"``).  ``Money`` accepts numbers, numeric strings
and ``Decimal`` values on input and normalises them; ``parse_amount``
and ``format_amount`` are the helpers the store uses for arithmetic.
JSON field names are camelCase, Python attributes snake_case.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Annotated, Any, ClassVar, Optional, Tuple

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

CENT = Decimal("0.01")


def parse_amount(value: Any) -> Decimal:
    """Convert ``value`` to a finite ``Decimal``.

    Floats go through ``str`` so ``15000.5`` becomes ``Decimal("15000.5")``
    rather than its binary expansion.
    """
    if isinstance(value, bool):
        raise ValueError("Amount must be a number")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


def format_amount(value: Any) -> str:
    """Serialise an amount with exactly two fraction digits."""
    return str(parse_amount(value).quantize(CENT, rounding=ROUND_HALF_UP))


Money = Annotated[str, BeforeValidator(format_amount)]


class CamelModel(BaseModel):
    """Base for every payload: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UpdateModel(CamelModel):
    """Base for partial updates.

    Unknown fields are rejected so derived or protected attributes
    (balances, ratings, counters) cannot be smuggled into an update.
    A field set to ``None`` clears the stored value, which is only
    allowed for the fields listed in ``nullable_fields``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    nullable_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_for_required_fields(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{name} cannot be null")
        return self


class ListingFilters(BaseModel):
    """Browse filters shared by jobs and marketplace items."""

    category: Optional[str] = Field(None, examples=["Cleaning"])
    location: Optional[str] = Field(None, examples=["freetown"])
    search: Optional[str] = Field(None, examples=["laptop"])


class MessageResponse(BaseModel):
    message: str
