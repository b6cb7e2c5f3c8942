from enum import Enum
from typing import Final

from pydantic import Field, PositiveInt, field_validator, model_serializer

from .base_k8s import KubeBase

SUFFIXES: Final[dict[int, str]] = {
    -3: "m",
    0: "",
    3: "k",
    6: "M",
    9: "G",
    12: "T",
    15: "P",
    18: "E",
}


class QuantityFormat(str, Enum):
    """Serialization family of a Kubernetes resource quantity."""

    DECIMAL_SI = "DecimalSI"
    BINARY_SI = "BinarySI"


class Quantity(KubeBase):
    """
    A Kubernetes resource quantity.

    The value is ``amount * 10 ** exponent``. Serialized it becomes the
    canonical quantity string (e.g. ``512m``, ``1M``, ``268435456``).
    Fractional values are always written with decimal suffixes, so a
    milli-scaled BinarySI quantity renders the same as a DecimalSI one.
    """

    amount: PositiveInt = Field(
        ..., description="Required positive integer mantissa of the quantity."
    )
    exponent: int = Field(
        default=0,
        description="Power of ten applied to amount. Multiple of 3 in [-3, 18].",
    )
    format: QuantityFormat = Field(
        default=QuantityFormat.DECIMAL_SI,
        description="Quantity format family.",
    )

    @field_validator("exponent")
    def validate_exponent(cls, v: int) -> int:
        if v not in SUFFIXES:
            raise ValueError(
                f"Invalid exponent {v}. Valid values: {sorted(SUFFIXES)}"
            )
        return v

    def canonical(self) -> "Quantity":
        """Return the same value with the largest exact SI suffix."""
        amount, exponent = self.amount, self.exponent
        while amount % 1000 == 0 and exponent + 3 in SUFFIXES:
            amount //= 1000
            exponent += 3
        return Quantity(amount=amount, exponent=exponent, format=self.format)

    def __str__(self) -> str:
        return f"{self.amount}{SUFFIXES[self.exponent]}"

    @model_serializer
    def serialize(self) -> str:
        return str(self)
