"""Account tree nodes and classification of accounts by name."""

from __future__ import annotations

from enum import IntEnum


class AccountType(IntEnum):
    """Broad category an account belongs to."""

    ASSET = 0
    LIABILITY = 1
    EQUITY = 2
    INCOME = 3
    EXPENSE = 4


class Account:
    """A node in the account hierarchy."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.full_name = name
        self.type = AccountType.ASSET
        self.parent: Account | None = None
        self.children: list[Account] = []
        self.alias = ""
        self.note = ""
        self.is_virtual = False
        self.is_bracketed = False

    def __repr__(self) -> str:
        return f"Account({self.full_name!r})"

    def add_child(self, child: Account) -> None:
        """Attach ``child`` below this account and refresh its full names."""
        child.parent = self
        child._update_full_name()
        self.children.append(child)

    def _update_full_name(self) -> None:
        if self.parent is not None:
            self.full_name = f"{self.parent.full_name}:{self.name}"
        else:
            self.full_name = self.name
        for child in self.children:
            child._update_full_name()

    def find_child(self, name: str) -> Account | None:
        """Return the direct child called ``name``, or None."""
        return next((child for child in self.children if child.name == name), None)

    def find_or_create_child(self, name: str) -> Account:
        """Return the direct child called ``name``, creating it if needed."""
        child = self.find_child(name)
        if child is None:
            child = Account(name)
            self.add_child(child)
        return child

    def is_descendant_of(self, ancestor: Account) -> bool:
        """True if ``ancestor`` appears somewhere above this account."""
        current = self.parent
        while current is not None:
            if current is ancestor:
                return True
            current = current.parent
        return False


_TYPE_PREFIXES = (
    ("asset", AccountType.ASSET),
    ("liabilit", AccountType.LIABILITY),
    ("equit", AccountType.EQUITY),
    ("income", AccountType.INCOME),
    ("revenue", AccountType.INCOME),
    ("expense", AccountType.EXPENSE),
)


def determine_account_type(name: str) -> AccountType:
    """Guess the account type from the top-level segment of its name."""
    first = name.lower().split(":")[0]
    for prefix, account_type in _TYPE_PREFIXES:
        if first.startswith(prefix):
            return account_type
    return AccountType.ASSET