"""Abstract interfaces for repositories, journal parsers, storage and formatters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO, Any

from gledger.account import Account
from gledger.amount import Commodity
from gledger.directive import Directive
from gledger.transaction import Transaction


class AccountRepository(ABC):
    """Keeps the account tree."""

    @abstractmethod
    def find_account(self, full_name: str) -> Account | None:
        """The account with this full name, or None."""

    @abstractmethod
    def create_account(self, full_name: str) -> Account:
        """Create and return the account with this full name."""

    @abstractmethod
    def find_or_create_account(self, full_name: str) -> Account:
        """The account with this full name, created if missing."""

    @abstractmethod
    def root_account(self) -> Account:
        """The root of the account tree."""

    @abstractmethod
    def all_accounts(self) -> list[Account]:
        """Every known account."""


class CommodityRepository(ABC):
    """Keeps the known commodities."""

    @abstractmethod
    def find_commodity(self, symbol: str) -> Commodity | None:
        """The commodity with this symbol, or None."""

    @abstractmethod
    def create_commodity(self, symbol: str) -> Commodity:
        """Create and return a commodity with this symbol."""

    @abstractmethod
    def find_or_create_commodity(self, symbol: str) -> Commodity:
        """The commodity with this symbol, created if missing."""

    @abstractmethod
    def register_commodity(self, commodity: Commodity) -> None:
        """Store ``commodity`` under its symbol."""

    @abstractmethod
    def all_commodities(self) -> list[Commodity]:
        """Every known commodity."""

    @abstractmethod
    def set_default_commodity(self, commodity: Commodity) -> None:
        """Make ``commodity`` the default."""

    @abstractmethod
    def default_commodity(self) -> Commodity | None:
        """The default commodity, if one is set."""


class TransactionRepository(ABC):
    """Keeps transactions."""

    @abstractmethod
    def find_transaction(self, transaction_id: str) -> Transaction | None:
        """The transaction with this id, or None."""

    @abstractmethod
    def save_transaction(self, transaction: Transaction) -> None:
        """Store ``transaction``; raise on failure."""

    @abstractmethod
    def all_transactions(self) -> list[Transaction]:
        """Every stored transaction."""

    @abstractmethod
    def transactions_between(self, start: str, end: str) -> list[Transaction]:
        """Transactions dated from ``start`` to ``end``."""


class JournalRepository(ABC):
    """A journal that can be loaded from and saved to files."""

    @abstractmethod
    def load_from_file(self, filename: str) -> None:
        """Read the journal from ``filename``; raise on failure."""

    @abstractmethod
    def save_to_file(self, filename: str) -> None:
        """Write the journal to ``filename``; raise on failure."""

    @abstractmethod
    def transactions(self) -> list[Transaction]:
        """The journal's transactions."""

    @abstractmethod
    def accounts(self) -> list[Account]:
        """The journal's accounts."""

    @abstractmethod
    def commodities(self) -> list[Commodity]:
        """The journal's commodities."""


class JournalParser(ABC):
    """Turns journal text into transactions and directives."""

    @abstractmethod
    def parse(self, stream: IO[str]) -> tuple[list[Transaction], list[Directive]]:
        """Parse ``stream``; raise on malformed input."""


class Storage(ABC):
    """Persists journal data."""

    @abstractmethod
    def load(self) -> tuple[list[Transaction], list[Directive]]:
        """Read the stored journal data."""

    @abstractmethod
    def save(self, transactions: list[Transaction], directives: list[Directive]) -> None:
        """Store journal data."""

    @abstractmethod
    def load_from_stream(self, stream: IO[str]) -> tuple[list[Transaction], list[Directive]]:
        """Read journal data from ``stream``."""

    @abstractmethod
    def save_to_stream(
        self,
        stream: IO[str],
        transactions: list[Transaction],
        directives: list[Directive],
    ) -> None:
        """Write journal data to ``stream``."""


class Formatter(ABC):
    """Renders report data as text."""

    @abstractmethod
    def format(self, data: Any) -> str:
        """Render ``data``; raise if it cannot be formatted."""