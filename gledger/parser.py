"""Line-oriented parser for ledger journal files."""

from __future__ import annotations

import math
import re
from datetime import date
from typing import IO, Iterable, Iterator

from gledger.account import Account
from gledger.amount import Amount, Commodity
from gledger.posting import Posting, PriceSpec
from gledger.transaction import Transaction, TransactionStatus

_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_POSTING_SEPARATOR = re.compile(r" {2}|\t")
_PREFIX_SYMBOLS = ("$", "£", "€")
_DEFAULT_SYMBOL = "$"


class ParseError(ValueError):
    """Raised when journal text cannot be parsed."""


def _parse_float(text: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise ValueError(text)
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(text)
    return value


def _is_expression(text: str) -> bool:
    return text.startswith("(") and text.endswith(")")


class Parser:
    """Parses transactions from journal text.

    After :meth:`parse`, the transactions are kept in ``transactions`` and the
    names of the accounts seen are available from :meth:`accounts`.
    """

    def __init__(self) -> None:
        self.transactions: list[Transaction] = []
        self._accounts: dict[str, None] = {}
        self._lines: Iterator[str] = iter(())
        self._current = ""
        self._line_number = 0

    def parse(self, stream: IO[str] | Iterable[str]) -> list[Transaction]:
        """Parse every transaction in ``stream`` and return them.

        Raises ParseError, naming the line, when a transaction is malformed.
        """
        self._lines = iter(stream)
        self._line_number = 0
        self.transactions = []

        while self._advance():
            stripped = self._current.strip()
            if not stripped or stripped.startswith(";"):
                continue
            if self._is_transaction_line():
                try:
                    transaction = self._parse_transaction()
                except ParseError as exc:
                    raise ParseError(f"line {self._line_number}: {exc}") from exc
                self.transactions.append(transaction)

        return list(self.transactions)

    def accounts(self) -> list[str]:
        """Names of all accounts seen in postings."""
        return list(self._accounts)

    def _advance(self) -> bool:
        line = next(self._lines, None)
        if line is None:
            return False
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        self._current = line
        self._line_number += 1
        return True

    def _is_transaction_line(self) -> bool:
        line = self._current
        if len(line) < 10:
            return False
        head = line[:10]
        if head[4] in "-/" and head[7] in "-/":
            try:
                self.parse_date(head)
            except ParseError:
                return False
            return True
        return False

    def _parse_transaction(self) -> Transaction:
        when, status, payee = self._parse_header()
        transaction = Transaction(date=when, status=status, payee=payee)

        while self._advance():
            if not self._current.startswith((" ", "\t")):
                # The line that ends a transaction is not looked at again.
                self._line_number -= 1
                break
            stripped = self._current.strip()
            if not stripped or stripped.startswith(";"):
                continue
            transaction.add_posting(self._parse_posting())

        if len(transaction.postings) < 2:
            raise ParseError("transaction must have at least 2 postings")

        self._apply_amount_elision(transaction)
        return transaction

    def _parse_header(self) -> tuple[date, TransactionStatus, str]:
        line = self._current
        when = self.parse_date(line[:10])
        rest = line[10:].strip()
        status = TransactionStatus.PENDING
        if rest.startswith("*"):
            status = TransactionStatus.CLEARED
            rest = rest[1:].strip()
        elif rest.startswith("!"):
            rest = rest[1:].strip()
        return when, status, rest

    def parse_date(self, text: str) -> date:
        """Parse ``YYYY-MM-DD`` or ``YYYY/MM/DD``."""
        match = _DATE_PATTERN.fullmatch(text.replace("/", "-"))
        if match is None:
            raise ParseError(f"invalid date format: {text}")
        year, month, day = (int(part) for part in match.groups())
        try:
            return date(year, month, day)
        except ValueError:
            raise ParseError(f"invalid date format: {text}") from None

    def _parse_posting(self) -> Posting:
        line = self._current.strip()
        separator = _POSTING_SEPARATOR.search(line)
        if separator is not None and separator.start() > 0:
            account_name = line[: separator.start()].strip()
            amount_text = line[separator.start():].strip()
        else:
            account_name = line.strip()
            amount_text = ""

        self._accounts[account_name] = None
        account = Account(account_name)
        account.full_name = account_name

        amount: Amount | None = None
        price: PriceSpec | None = None
        expression = ""
        if amount_text:
            try:
                amount, price = self.parse_amount_with_price(amount_text)
            except ParseError:
                amount, price = None, None
            else:
                if _is_expression(amount_text.strip()):
                    expression = amount_text

        return Posting(
            account=account,
            amount=amount,
            price=price,
            expression_amount=expression,
        )

    def parse_amount(self, text: str) -> Amount:
        """Parse an amount such as ``10.00 GBP``, ``$25.50`` or ``100``.

        A bare number is taken to be in ``$``. The commodity's precision is
        the number of digits written after the decimal point. A parenthesised
        expression is not evaluated and yields a zero ``$`` amount.
        """
        text = text.strip()

        if _is_expression(text):
            return Amount.from_float(0.0, Commodity(_DEFAULT_SYMBOL))

        symbol = ""
        value_text = text.replace(",", ".")

        prefix = next((s for s in _PREFIX_SYMBOLS if text.startswith(s)), None)
        if prefix is not None:
            symbol = prefix
            value_text = text[len(prefix):].strip().replace(",", ".")
        else:
            fields = text.split()
            if len(fields) == 2:
                value_text = fields[0].replace(",", ".")
                symbol = fields[1]
            elif len(fields) == 1:
                value_text = fields[0].replace(",", ".")
                symbol = _DEFAULT_SYMBOL

        try:
            value = _parse_float(value_text)
        except ValueError:
            raise ParseError(f"invalid amount: {text}") from None

        commodity = Commodity(symbol)
        if "." in value_text:
            commodity.precision = len(value_text.split(".")[1])
        else:
            commodity.precision = 0

        return Amount.from_float(value, commodity)

    def parse_amount_with_price(self, text: str) -> tuple[Amount, PriceSpec | None]:
        """Parse an amount with an optional ``@`` unit or ``@@`` total price."""
        text = text.strip()

        for marker, is_total in (("@@", True), ("@", False)):
            index = text.find(marker)
            if index > 0:
                amount = self.parse_amount(text[:index].strip())
                price = self.parse_amount(text[index + len(marker):].strip())
                return amount, PriceSpec(price, is_total)

        return self.parse_amount(text), None

    def _apply_amount_elision(self, transaction: Transaction) -> None:
        missing = [
            posting
            for posting in transaction.postings
            if posting.amount is None and not posting.expression_amount
        ]
        has_expression = any(posting.expression_amount for posting in transaction.postings)

        if len(missing) > 1:
            raise ParseError("only one posting can have an elided amount")

        if len(missing) != 1 or has_expression:
            return

        target = missing[0]
        sums: dict[str, float] = {}
        commodities: dict[str, Commodity] = {}
        for posting in transaction.postings:
            if posting is target or posting.amount is None:
                continue
            symbol = posting.amount.commodity.symbol or _DEFAULT_SYMBOL
            sums[symbol] = sums.get(symbol, 0.0) + float(posting.amount)
            commodities[symbol] = posting.amount.commodity

        if len(sums) > 1:
            raise ParseError("cannot elide amount with multiple commodities")
        if len(sums) == 1:
            ((symbol, total),) = sums.items()
            commodity = commodities.get(symbol) or Commodity(symbol)
            target.amount = Amount.from_float(-total, commodity)