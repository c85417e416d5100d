"""Personal finance domain: transactions, accounts and processors.

Account and processor variants differ only in trivial behaviour, so each is a
tag on a plain value and the behaviour lives in pure functions that dispatch on
the tag. ``apply_transaction`` never mutates its input; it returns the account
as it stands after the transaction.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import Field
from pydantic.dataclasses import dataclass as pydantic_dataclass


class ProcessorKind(str, Enum):
    """Payment channel used to process a transaction."""

    BANK_TRANSFER = "bank_transfer"
    MOBILE_MONEY = "mobile_money"
    CRYPTO_WALLET = "crypto_wallet"

    @property
    def label(self) -> str:
        return _PROCESSOR_LABELS[self]


_PROCESSOR_LABELS: dict[ProcessorKind, str] = {
    ProcessorKind.BANK_TRANSFER: "bank transfer",
    ProcessorKind.MOBILE_MONEY: "mobile money",
    ProcessorKind.CRYPTO_WALLET: "crypto transaction",
}


class AccountKind(str, Enum):
    STANDARD = "standard"
    SAVINGS = "savings"


@pydantic_dataclass(frozen=True)
class Transaction:
    id: int
    date: datetime
    amount: Annotated[Decimal, Field(gt=0)]
    category: Annotated[str, Field(min_length=1)]


@pydantic_dataclass(frozen=True)
class Account:
    account_number: Annotated[str, Field(min_length=1)]
    balance: Decimal
    kind: AccountKind = AccountKind.STANDARD


@dataclass(frozen=True, slots=True)
class TransactionOutcome:
    """Result of applying a transaction to an account."""

    account: Account
    applied: bool
    message: str


def format_money(amount: Decimal) -> str:
    return f"${amount:,.2f}"


def describe_processing(transaction: Transaction, kind: ProcessorKind) -> str:
    """Describe how ``kind`` processes ``transaction``."""
    return f"Processing {kind.label}: {format_money(transaction.amount)} for {transaction.category}"


def apply_transaction(account: Account, transaction: Transaction) -> TransactionOutcome:
    """Debit ``transaction`` from ``account``.

    Savings accounts refuse a debit larger than the current balance and keep
    the balance unchanged. Standard accounts always debit.
    """
    if account.kind is AccountKind.SAVINGS and transaction.amount > account.balance:
        return TransactionOutcome(account=account, applied=False, message="Insufficient funds")

    updated = replace(account, balance=account.balance - transaction.amount)
    return TransactionOutcome(
        account=updated,
        applied=True,
        message=f"Transaction applied. New balance: {format_money(updated.balance)}",
    )
