from datetime import date

import pytest

from gledger.amount import Amount, Commodity
from gledger.directive import (
    AccountDirective,
    AliasDirective,
    ApplyDirective,
    AssertDirective,
    BucketDirective,
    CheckDirective,
    CommodityDirective,
    Directive,
    DirectiveType,
    IncludeDirective,
    PriceDirective,
)


@pytest.mark.parametrize(
    "directive, kind, text",
    [
        (AccountDirective("Assets:Cash"), DirectiveType.ACCOUNT, "account Assets:Cash"),
        (AccountDirective("Assets:Cash", "note"), DirectiveType.ACCOUNT,
         "account Assets:Cash ; note"),
        (CommodityDirective("EUR"), DirectiveType.COMMODITY, "commodity EUR"),
        (CommodityDirective("EUR", note="euro"), DirectiveType.COMMODITY,
         "commodity EUR ; euro"),
        (AliasDirective("cash", "Assets:Cash"), DirectiveType.ALIAS,
         "alias cash=Assets:Cash"),
        (IncludeDirective("other.ledger"), DirectiveType.INCLUDE, "include other.ledger"),
        (ApplyDirective("Assets"), DirectiveType.APPLY, "apply account Assets"),
        (BucketDirective("Assets:Cash"), DirectiveType.BUCKET, "bucket Assets:Cash"),
        (AssertDirective("amount > 0"), DirectiveType.ASSERT, "assert amount > 0"),
        (CheckDirective("amount > 0"), DirectiveType.CHECK, "check amount > 0"),
    ],
)
def test_type_and_text(directive, kind, text):
    assert directive.type() is kind
    assert str(directive) == text


def test_price_directive_text():
    price = Amount(10, Commodity("GBP"))
    directive = PriceDirective(date(2011, 1, 1), "AAA", price)
    assert directive.type() is DirectiveType.PRICE
    assert str(directive) == f"P 2011/01/01 AAA {price}"


def test_directive_base_is_abstract():
    with pytest.raises(TypeError):
        Directive()


def test_directives_compare_by_value():
    assert AccountDirective("Assets:Cash", "n") == AccountDirective("Assets:Cash", "n")
    assert AccountDirective("Assets:Cash") != AccountDirective("Assets:Bank")