"""Transactions: dated groups of postings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from gledger.amount import Amount
from gledger.posting import Posting


class TransactionStatus(IntEnum):
    """Clearing state of a transaction."""

    PENDING = 0
    CLEARED = 1
    RECONCILED = 2


@dataclass(eq=False)
class Transaction:
    """A dated entry made of postings."""

    date: Any
    id: str = ""
    aux_date: Any = None
    status: TransactionStatus = TransactionStatus.PENDING
    code: str = ""
    payee: str = ""
    note: str = ""
    postings: list[Posting] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)

    def add_posting(self, posting: Posting) -> None:
        """Append ``posting`` and make it belong to this transaction."""
        posting.transaction = self
        self.postings.append(posting)

    def is_balanced(self) -> bool:
        """True if there are at least two postings and every commodity sums to zero."""
        if len(self.postings) < 2:
            return False
        sums: dict[str, Amount] = {}
        for posting in self.postings:
            if posting.amount is None:
                continue
            symbol = posting.amount.commodity.symbol
            existing = sums.get(symbol)
            sums[symbol] = posting.amount.copy() if existing is None else existing + posting.amount
        return all(total.is_zero() for total in sums.values())

    def copy(self) -> Transaction:
        """A copy with copied postings that belong to the new transaction."""
        clone = Transaction(
            date=self.date,
            id=self.id,
            aux_date=self.aux_date,
            status=self.status,
            code=self.code,
            payee=self.payee,
            note=self.note,
            metadata=dict(self.metadata),
        )
        for posting in self.postings:
            clone.add_posting(posting.copy())
        return clone

    def __str__(self) -> str:
        return f"{self.date.strftime('%Y/%m/%d')} {self.payee}"