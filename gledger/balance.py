"""Multi-commodity balances."""

from __future__ import annotations

from typing import Any

from gledger.amount import Amount, Commodity


class BalanceError(ValueError):
    """Raised when a balance's internal state is inconsistent."""


class Balance:
    """A sum of amounts, kept per commodity symbol with zeros dropped."""

    def __init__(self, amount: Amount | None = None) -> None:
        self._amounts: dict[str, Amount] = {}
        if amount is not None:
            self.add(amount)

    def __repr__(self) -> str:
        return f"Balance({self})"

    def add(self, amount: Amount | None) -> None:
        if amount is None or amount.is_zero():
            return
        symbol = amount.commodity.symbol
        existing = self._amounts.get(symbol)
        total = amount.copy() if existing is None else existing + amount
        if total.is_zero():
            self._amounts.pop(symbol, None)
        else:
            self._amounts[symbol] = total

    def subtract(self, amount: Amount | None) -> None:
        if amount is None or amount.is_zero():
            return
        self.add(-amount)

    def add_balance(self, other: Balance) -> None:
        for amount in list(other._amounts.values()):
            self.add(amount)

    def subtract_balance(self, other: Balance) -> None:
        for amount in list(other._amounts.values()):
            self.subtract(amount)

    def get(self, symbol: str) -> Amount | None:
        """A copy of the amount held in ``symbol``, or None."""
        amount = self._amounts.get(symbol)
        return amount.copy() if amount is not None else None

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._amounts

    def amounts(self) -> list[Amount]:
        """Copies of the held amounts, ordered by commodity symbol."""
        return [self._amounts[symbol].copy() for symbol in sorted(self._amounts)]

    def commodities(self) -> list[str]:
        return sorted(self._amounts)

    def is_zero(self) -> bool:
        return not self._amounts

    def has_single_commodity(self) -> bool:
        return len(self._amounts) == 1

    def has_multiple_commodities(self) -> bool:
        return len(self._amounts) > 1

    def clear(self) -> None:
        self._amounts = {}

    def copy(self) -> Balance:
        result = Balance()
        result._amounts = {symbol: amount.copy() for symbol, amount in self._amounts.items()}
        return result

    def __neg__(self) -> Balance:
        result = Balance()
        result._amounts = {symbol: -amount for symbol, amount in self._amounts.items()}
        return result

    def __abs__(self) -> Balance:
        result = Balance()
        result._amounts = {symbol: abs(amount) for symbol, amount in self._amounts.items()}
        return result

    def convert_to(self, target_commodity: Commodity, commodity_repo: Any = None) -> Balance:
        """Convert each amount using its commodity's latest price in the target.

        Amounts without such a price are kept as they are.
        """
        result = Balance()
        for amount in self.amounts():
            if amount.commodity.symbol == target_commodity.symbol:
                result.add(amount)
                continue
            price = amount.commodity.get_latest_price(target_commodity.symbol)
            if price is not None:
                result.add(amount.convert_to(target_commodity, price.number))
            else:
                result.add(amount)
        return result

    def __str__(self) -> str:
        if self.is_zero():
            return "0"
        return ", ".join(amount.format(True) for amount in self.amounts())

    def format(self, separator: str = ", ", show_zero: bool = False) -> str:
        """Join the amounts with ``separator``; an empty balance is "" or "0"."""
        if self.is_zero():
            return "0" if show_zero else ""
        return separator.join(amount.format(True) for amount in self.amounts())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Balance):
            return NotImplemented
        return self._amounts == other._amounts

    __hash__ = None  # type: ignore[assignment]

    def validate(self) -> None:
        """Raise BalanceError if an entry is stored under the wrong key or is zero."""
        for symbol, amount in self._amounts.items():
            if amount.commodity.symbol != symbol:
                raise BalanceError(
                    f"commodity mismatch: key {symbol}, "
                    f"amount commodity {amount.commodity.symbol}"
                )
            if amount.is_zero():
                raise BalanceError(f"zero amount should not be stored for commodity {symbol}")