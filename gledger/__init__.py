"""Plain-text double-entry accounting: amounts, balances, accounts, postings and a journal parser."""

__version__ = "0.1.0"