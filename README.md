# gledger

gledger is a library for plain-text, double-entry accounting journals.
It reads the transactions in journal text and gives you the building
blocks for working with them:

- `gledger.amount`: `Commodity` (symbol, precision, price history) and
  `Amount`, an exact rational quantity of a commodity.
- `gledger.balance`: `Balance`, a multi-commodity total that drops any
  commodity whose amount comes to zero.
- `gledger.account`: `Account`, a node in a tree of named accounts
  (`Assets:Cash`), and `determine_account_type`, which classifies an
  account by its top-level name into an `AccountType`.
- `gledger.posting` and `gledger.transaction`: `Posting` and
  `Transaction`, with payee, status, prices (`PriceSpec`), costs
  (`CostBasis`) and balance assertions (`BalanceAssertion`).
- `gledger.directive`: directive records such as `AccountDirective`,
  `CommodityDirective` and `PriceDirective`, each rendering itself as a
  journal line with `str()`.
- `gledger.lexer`: `Lexer`, which splits journal text into `Token`s.
- `gledger.parser`: `Parser`, which reads whole transactions and fills
  in the one posting without an amount so that the transaction balances.
- `gledger.ports`: abstract interfaces (`AccountRepository`,
  `CommodityRepository`, `TransactionRepository`, `JournalRepository`,
  `JournalParser`, `Storage`, `Formatter`) for code that builds on the
  library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Amounts and balances

```python
from gledger.amount import Amount, Commodity
from gledger.balance import Balance

usd = Commodity("USD")
eur = Commodity("EUR")

total = Amount.from_string("10.50", usd) + Amount.from_string("2.25", usd)
print(total.format(True))          # 12.75 USD

balance = Balance()
balance.add(total)
balance.add(Amount.from_string("5", eur))
print(balance)                     # 5.00 EUR, 12.75 USD
```

A new `Commodity` formats with two decimal places; set its `precision`
to change that. Amounts of different commodities cannot be added,
subtracted or compared: doing so raises `CommodityMismatchError`.
`Amount.divide` by zero raises `ZeroDivisionError`.

`Commodity.add_price` records prices by date, and
`Balance.convert_to` converts each amount with its commodity's latest
price in the target commodity, keeping amounts that have no such price.

## Accounts

```python
from gledger.account import Account, AccountType, determine_account_type

assets = Account("Assets")
cash = assets.find_or_create_child("Cash")
print(cash.full_name)                                                  # Assets:Cash
print(determine_account_type("Expenses:Food") is AccountType.EXPENSE)  # True
```

## Parsing a journal

```python
import io
from gledger.parser import Parser

journal = io.StringIO(
    "2011-01-01 * Opening balance\n"
    "    Assets:Cash                    10.00 USD\n"
    "    Equity:Opening balance\n"
)

parser = Parser()
transactions = parser.parse(journal)
print(transactions[0].payee)              # Opening balance
print(float(transactions[0].postings[1].amount))  # -10.0
print(sorted(parser.accounts()))   # ['Assets:Cash', 'Equity:Opening balance']
```

A transaction starts with a `YYYY-MM-DD` or `YYYY/MM/DD` date, optionally
followed by `*` (cleared) or `!`, then the payee. Its postings are the
indented lines that follow; account and amount are separated by two
spaces or a tab.

`Parser.parse_date` accepts both date forms. `Parser.parse_amount`
understands amounts such as `10.00 GBP`, `$25.50` and a bare `100`; a
bare number is taken to be in the default `$` commodity, and the
commodity's precision is the number of digits written after the decimal
point. `Parser.parse_amount_with_price` also reads a per-unit price
(`1 AAA @ 10.00 GBP`) or a total price (`12.00 EUR @@ 10.00 GBP`).
Malformed input raises `ParseError`, as does a transaction with fewer
than two postings or with more than one posting lacking an amount.

## Tokenizing

```python
import io
from gledger.lexer import Lexer

tokens = list(Lexer(io.StringIO("2011-01-01 * Payee\n")))
print([token.type.name for token in tokens])  # ['DATE', 'STATUS', 'STRING', 'NEWLINE']
```

## What gledger does not do

- There is no command-line program: no balance, register or print
  reports.
- The parser reads transactions only. Directive lines (`account`,
  `commodity`, `P`, `include` and so on) are skipped; the directive
  classes are plain records.
- Parenthesised amount expressions are not evaluated; they are read as
  a zero `$` amount.
- The interfaces in `gledger.ports` have no implementations here: there
  is no journal storage or repository.