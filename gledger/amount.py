"""Commodities with price histories, and exact amounts of a commodity."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Union

Number = Union[Fraction, int, float, str]


class CommodityMismatchError(ValueError):
    """Raised when amounts of different commodities are combined."""


def _to_fraction(value: Any) -> Fraction:
    return value if isinstance(value, Fraction) else Fraction(value)


@dataclass
class PricePoint:
    """The price of a commodity on a given date."""

    date: Any
    amount: Amount


class Commodity:
    """A currency or other unit that amounts are counted in."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        self.precision = 2
        self.format = ""
        self.no_market = False
        self.note = ""
        self.alias = ""
        self.price_history: list[PricePoint] = []

    def __repr__(self) -> str:
        return f"Commodity({self.symbol!r})"

    def add_price(self, date: Any, amount: Amount) -> None:
        """Record a price, keeping history ordered by date then target symbol.

        A price on the same date in the same target commodity replaces the old one.
        """
        point = PricePoint(date, amount)
        target = amount.commodity.symbol
        for index, existing in enumerate(self.price_history):
            existing_target = existing.amount.commodity.symbol
            if date < existing.date or (date == existing.date and target < existing_target):
                self.price_history.insert(index, point)
                return
            if date == existing.date and target == existing_target:
                self.price_history[index] = point
                return
        self.price_history.append(point)

    def get_price_at(self, date: Any, target_commodity: str) -> Amount | None:
        """The most recent price in ``target_commodity`` on or before ``date``."""
        best: PricePoint | None = None
        for point in self.price_history:
            if point.date > date:
                break
            if point.amount.commodity.symbol == target_commodity:
                best = point
        return best.amount if best is not None else None

    def get_latest_price(self, target_commodity: str) -> Amount | None:
        """The last recorded price in ``target_commodity``."""
        for point in reversed(self.price_history):
            if point.amount.commodity.symbol == target_commodity:
                return point.amount
        return None

    def has_price_history(self) -> bool:
        return bool(self.price_history)

    def format_number(self, number: Number) -> str:
        """Render ``number`` using the custom format or the precision."""
        if self.format:
            return self.format
        value = _to_fraction(number)
        if self.precision <= 0:
            return str(value)
        return f"{float(value):.{self.precision}f}"

    def copy(self) -> Commodity:
        """A copy whose price history can be changed independently."""
        clone = Commodity(self.symbol)
        clone.precision = self.precision
        clone.format = self.format
        clone.no_market = self.no_market
        clone.note = self.note
        clone.alias = self.alias
        clone.price_history = [
            PricePoint(point.date, point.amount.copy()) for point in self.price_history
        ]
        return clone


class Amount:
    """An exact rational quantity of a commodity."""

    def __init__(self, number: Number, commodity: Commodity) -> None:
        self.number = _to_fraction(number)
        self.commodity = commodity

    @classmethod
    def from_float(cls, value: float, commodity: Commodity) -> Amount:
        return cls(Fraction(float(value)), commodity)

    @classmethod
    def from_string(cls, text: str, commodity: Commodity) -> Amount:
        """Parse a decimal or ``a/b`` number; raise ValueError if malformed."""
        if text != text.strip():
            raise ValueError(f"invalid number format: {text}")
        try:
            number = Fraction(text)
        except (ValueError, ZeroDivisionError):
            raise ValueError(f"invalid number format: {text}") from None
        return cls(number, commodity)

    @classmethod
    def zero(cls, commodity: Commodity) -> Amount:
        return cls(Fraction(0), commodity)

    def __repr__(self) -> str:
        return f"Amount({self.number!r}, {self.commodity.symbol!r})"

    def _check_same(self, other: Amount, action: str) -> None:
        if self.commodity.symbol != other.commodity.symbol:
            raise CommodityMismatchError(
                f"cannot {action} different commodities: "
                f"{self.commodity.symbol} and {other.commodity.symbol}"
            )

    def __add__(self, other: Amount) -> Amount:
        self._check_same(other, "add")
        return Amount(self.number + other.number, self.commodity)

    def __sub__(self, other: Amount) -> Amount:
        self._check_same(other, "subtract")
        return Amount(self.number - other.number, self.commodity)

    def multiply(self, factor: Number) -> Amount:
        return Amount(self.number * _to_fraction(factor), self.commodity)

    def divide(self, divisor: Number) -> Amount:
        value = _to_fraction(divisor)
        if value == 0:
            raise ZeroDivisionError("division by zero")
        return Amount(self.number / value, self.commodity)

    def __neg__(self) -> Amount:
        return Amount(-self.number, self.commodity)

    def __abs__(self) -> Amount:
        return Amount(abs(self.number), self.commodity)

    def is_zero(self) -> bool:
        return self.number == 0

    def is_positive(self) -> bool:
        return self.number > 0

    def is_negative(self) -> bool:
        return self.number < 0

    def compare(self, other: Amount) -> int:
        """-1, 0 or 1 as this amount is less than, equal to or above ``other``."""
        self._check_same(other, "compare")
        return (self.number > other.number) - (self.number < other.number)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return (
            self.commodity.symbol == other.commodity.symbol
            and self.number == other.number
        )

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> Amount:
        return Amount(self.number, self.commodity)

    def __str__(self) -> str:
        return self.format(False)

    def format(self, show_commodity: bool = False) -> str:
        """Render the number, followed by the symbol when requested."""
        text = self._format_number()
        if not show_commodity or not self.commodity.symbol:
            return text
        return f"{text} {self.commodity.symbol}"

    def _format_number(self) -> str:
        precision = self.commodity.precision
        if precision <= 0:
            return str(self.number)
        return f"{float(self.number):.{precision}f}"

    def convert_to(self, target_commodity: Commodity, rate: Number) -> Amount:
        return Amount(self.number * _to_fraction(rate), target_commodity)

    def __float__(self) -> float:
        return float(self.number)

    def round_to_precision(self) -> Amount:
        """Round half away from zero to the commodity's precision."""
        precision = self.commodity.precision
        if precision <= 0:
            return self.copy()
        scale = 10**precision
        scaled = self.number * scale
        magnitude = abs(scaled)
        whole, rest = divmod(magnitude.numerator, magnitude.denominator)
        if 2 * rest >= magnitude.denominator:
            whole += 1
        signed = whole if scaled >= 0 else -whole
        return Amount(Fraction(signed, scale), self.commodity)