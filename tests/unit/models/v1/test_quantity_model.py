"""Unit tests for the Quantity model."""

import pytest
from pydantic import ValidationError

from compose2kube.models.v1.quantity import Quantity, QuantityFormat


class TestQuantityBasics:
    def test_plain_amount(self):
        q = Quantity(amount=512)
        assert q.exponent == 0
        assert q.format is QuantityFormat.DECIMAL_SI
        assert str(q) == "512"

    def test_milli_suffix(self):
        assert str(Quantity(amount=250, exponent=-3)) == "250m"

    def test_non_positive_amount_raises(self):
        with pytest.raises(ValidationError):
            Quantity(amount=0)
        with pytest.raises(ValidationError):
            Quantity(amount=-5)

    def test_invalid_exponent_raises(self):
        with pytest.raises(ValidationError) as exc:
            Quantity(amount=1, exponent=2)
        assert "Invalid exponent" in str(exc.value)

    def test_frozen(self):
        q = Quantity(amount=1)
        with pytest.raises(ValidationError):
            q.amount = 2  # type: ignore[misc]


class TestCanonical:
    @pytest.mark.parametrize(
        "amount, exponent, expected",
        [
            (512, -3, "512m"),
            (2000, -3, "2"),
            (1500, -3, "1500m"),
            (1000, 0, "1k"),
            (1000000, 0, "1M"),
            (268435456, 0, "268435456"),
            (3 * 10**18, 0, "3E"),
        ],
    )
    def test_canonical_strings(self, amount, exponent, expected):
        assert str(Quantity(amount=amount, exponent=exponent).canonical()) == expected

    def test_canonical_keeps_format(self):
        q = Quantity(amount=4000, exponent=-3, format=QuantityFormat.BINARY_SI)
        assert q.canonical().format is QuantityFormat.BINARY_SI

    def test_stops_at_largest_suffix(self):
        q = Quantity(amount=1000, exponent=18).canonical()
        assert (q.amount, q.exponent) == (1000, 18)


class TestSerialization:
    def test_model_dump_is_string(self):
        assert Quantity(amount=512, exponent=-3).model_dump() == "512m"
