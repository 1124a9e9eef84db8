"""Journal directives such as ``account``, ``commodity`` and ``P``."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar

from gledger.amount import Amount


class DirectiveType(IntEnum):
    """Kind of a journal directive."""

    ACCOUNT = 0
    COMMODITY = 1
    PRICE = 2
    ALIAS = 3
    INCLUDE = 4
    APPLY = 5
    BUCKET = 6
    ASSERT = 7
    CHECK = 8


class Directive(ABC):
    """A non-transaction line of a journal."""

    directive_type: ClassVar[DirectiveType]

    def type(self) -> DirectiveType:
        return self.directive_type

    @abstractmethod
    def __str__(self) -> str:
        """The directive as it would appear in a journal."""


def _with_note(text: str, note: str) -> str:
    return f"{text} ; {note}" if note else text


@dataclass
class AccountDirective(Directive):
    directive_type: ClassVar[DirectiveType] = DirectiveType.ACCOUNT

    name: str
    note: str = ""

    def __str__(self) -> str:
        return _with_note(f"account {self.name}", self.note)


@dataclass
class CommodityDirective(Directive):
    directive_type: ClassVar[DirectiveType] = DirectiveType.COMMODITY

    symbol: str
    format: str = ""
    precision: int = 0
    note: str = ""

    def __str__(self) -> str:
        return _with_note(f"commodity {self.symbol}", self.note)


@dataclass
class PriceDirective(Directive):
    directive_type: ClassVar[DirectiveType] = DirectiveType.PRICE

    date: Any
    commodity: str
    price: Amount

    def __str__(self) -> str:
        return f"P {self.date.strftime('%Y/%m/%d')} {self.commodity} {self.price}"


@dataclass
class AliasDirective(Directive):
    directive_type: ClassVar[DirectiveType] = DirectiveType.ALIAS

    name: str
    value: str

    def __str__(self) -> str:
        return f"alias {self.name}={self.value}"


@dataclass
class IncludeDirective(Directive):
    directive_type: ClassVar[DirectiveType] = DirectiveType.INCLUDE

    path: str

    def __str__(self) -> str:
        return f"include {self.path}"


@dataclass
class ApplyDirective(Directive):
    directive_type: ClassVar[DirectiveType] = DirectiveType.APPLY

    account: str

    def __str__(self) -> str:
        return f"apply account {self.account}"


@dataclass
class BucketDirective(Directive):
    directive_type: ClassVar[DirectiveType] = DirectiveType.BUCKET

    account: str

    def __str__(self) -> str:
        return f"bucket {self.account}"


@dataclass
class AssertDirective(Directive):
    directive_type: ClassVar[DirectiveType] = DirectiveType.ASSERT

    expression: str

    def __str__(self) -> str:
        return f"assert {self.expression}"


@dataclass
class CheckDirective(Directive):
    directive_type: ClassVar[DirectiveType] = DirectiveType.CHECK

    expression: str

    def __str__(self) -> str:
        return f"check {self.expression}"