"""Encoding of raw compose resource values into Kubernetes quantities."""

import logging
from decimal import Decimal

from kubernetes.utils import parse_quantity

from compose2kube.core.exceptions import InvalidQuantityError
from compose2kube.models.v1 import (
    MAX_RESOURCE_VALUE,
    Quantity,
    QuantityFormat,
    ResourceName,
)

logger = logging.getLogger(__name__)

MILLI = Decimal(1000)


def _check_positive(resource: ResourceName, value: int, service_name: str | None):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidQuantityError(resource.value, value, service_name)
    if not 0 < value <= MAX_RESOURCE_VALUE:
        raise InvalidQuantityError(resource.value, value, service_name)


def encode_cpu(shares: int, service_name: str | None = None) -> Quantity:
    """
    Encode a CPU share count as a milli-scaled BinarySI quantity.

    The share count is kept as the raw milli amount, so ``512`` becomes
    ``512m`` and ``2000`` becomes ``2``.
    """
    _check_positive(ResourceName.CPU, shares, service_name)
    return Quantity(
        amount=shares, exponent=-3, format=QuantityFormat.BINARY_SI
    ).canonical()


def encode_memory(num_bytes: int, service_name: str | None = None) -> Quantity:
    """Encode a byte count as a DecimalSI quantity."""
    _check_positive(ResourceName.MEMORY, num_bytes, service_name)
    return Quantity(
        amount=num_bytes, exponent=0, format=QuantityFormat.DECIMAL_SI
    ).canonical()


def decode_cpu(quantity: Quantity | str) -> int:
    """Return the share count a CPU quantity was encoded from."""
    return _to_int(parse_quantity(str(quantity)) * MILLI, quantity)


def decode_memory(quantity: Quantity | str) -> int:
    """Return the byte count a memory quantity was encoded from."""
    return _to_int(parse_quantity(str(quantity)), quantity)


def _to_int(value: Decimal, quantity: Quantity | str) -> int:
    if value != value.to_integral_value():
        raise ValueError(f"Quantity {quantity} does not decode to an integer")
    return int(value)
