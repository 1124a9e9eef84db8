"""Postings: the lines of a transaction that move amounts between accounts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any

from gledger.account import Account
from gledger.amount import Amount

if TYPE_CHECKING:
    from gledger.transaction import Transaction


class PostingType(IntEnum):
    """Whether a posting is real, virtual ``(...)`` or bracketed ``[...]``."""

    NORMAL = 0
    VIRTUAL = 1
    BRACKET = 2


@dataclass
class BalanceAssertion:
    """An expected balance attached to a posting.

    ``is_assignment`` is True for ``=`` and False for ``==``.
    """

    amount: Amount | None = None
    date: Any = None
    inclusive: bool = False
    is_assignment: bool = False

    def copy(self) -> BalanceAssertion:
        return BalanceAssertion(
            amount=self.amount.copy() if self.amount is not None else None,
            date=self.date,
            inclusive=self.inclusive,
            is_assignment=self.is_assignment,
        )


@dataclass
class CostBasis:
    """The cost of a lot, either as a total or per unit."""

    amount: Amount | None = None
    date: Any = None
    label: str = ""
    per_unit_amount: Amount | None = None

    def copy(self) -> CostBasis:
        return CostBasis(
            amount=self.amount.copy() if self.amount is not None else None,
            date=self.date,
            label=self.label,
            per_unit_amount=(
                self.per_unit_amount.copy() if self.per_unit_amount is not None else None
            ),
        )


@dataclass
class PriceSpec:
    """A price annotation: ``@`` per unit, or ``@@`` (``is_total``) for the whole."""

    amount: Amount
    is_total: bool = False

    def copy(self) -> PriceSpec:
        return PriceSpec(self.amount.copy(), self.is_total)


@dataclass(eq=False)
class Posting:
    """One account line of a transaction."""

    account: Account
    amount: Amount | None = None
    cost: CostBasis | None = None
    price: PriceSpec | None = None
    balance_assertion: BalanceAssertion | None = None
    note: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    transaction: Transaction | None = field(default=None, repr=False)
    type: PostingType = PostingType.NORMAL
    is_generated: bool = False
    expression_amount: str = ""

    def set_price_amount(self, amount: Amount, is_total: bool = False) -> None:
        """Attach a price given as an amount, per unit or in total."""
        self.price = PriceSpec(amount, is_total)

    def is_virtual(self) -> bool:
        return self.type in (PostingType.VIRTUAL, PostingType.BRACKET)

    def is_bracketed(self) -> bool:
        return self.type is PostingType.BRACKET

    def cost_amount(self) -> Amount | None:
        """The total cost: per-unit cost times quantity, else the cost amount."""
        if self.cost is None:
            return None
        if self.cost.per_unit_amount is not None and self.amount is not None:
            return self.cost.per_unit_amount.multiply(self.amount.number)
        return self.cost.amount

    def market_value(self) -> Amount | None:
        """The amount priced through its price annotation, if it has one."""
        if self.price is not None and self.amount is not None:
            if self.price.is_total:
                return self.price.amount.copy()
            return self.price.amount.multiply(self.amount.number)
        return self.amount

    def copy(self) -> Posting:
        """A copy sharing the account but not belonging to any transaction."""
        return Posting(
            account=self.account,
            amount=self.amount.copy() if self.amount is not None else None,
            cost=self.cost.copy() if self.cost is not None else None,
            price=self.price.copy() if self.price is not None else None,
            balance_assertion=(
                self.balance_assertion.copy() if self.balance_assertion is not None else None
            ),
            note=self.note,
            metadata=dict(self.metadata),
            type=self.type,
            is_generated=self.is_generated,
        )