"""Personal finance demo: process three transactions against a savings account."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TextIO

from recordkeeper.adapters.repository import KeyedRepository
from recordkeeper.domain.finance import (
    Account,
    AccountKind,
    ProcessorKind,
    Transaction,
    apply_transaction,
    describe_processing,
    format_money,
)


class FinanceApp:
    def __init__(self, out: TextIO) -> None:
        self.out = out
        self.transactions: KeyedRepository[int, Transaction] = KeyedRepository("Transaction")

    def run(self, now: datetime | None = None) -> Account:
        """Run the demo and return the account after every transaction."""
        now = now or datetime.now()
        account = Account(account_number="SAV-12345", balance=Decimal("1000"), kind=AccountKind.SAVINGS)
        print(f"Created savings account with balance: {format_money(account.balance)}", file=self.out)

        batch = (
            (Transaction(id=1, date=now, amount=Decimal("150"), category="Groceries"), ProcessorKind.MOBILE_MONEY),
            (Transaction(id=2, date=now, amount=Decimal("75"), category="Utilities"), ProcessorKind.BANK_TRANSFER),
            (
                Transaction(id=3, date=now, amount=Decimal("200"), category="Entertainment"),
                ProcessorKind.CRYPTO_WALLET,
            ),
        )

        for transaction, processor in batch:
            print(describe_processing(transaction, processor), file=self.out)

        print("\nApplying transactions to account:", file=self.out)
        for transaction, _ in batch:
            outcome = apply_transaction(account, transaction)
            print(outcome.message, file=self.out)
            account = outcome.account

        for transaction, _ in batch:
            self.transactions.add(transaction)

        print(f"\nTotal transactions recorded: {self.transactions.count()}", file=self.out)
        return account


def run(out: TextIO, *, now: datetime | None = None) -> Account:
    return FinanceApp(out).run(now)
