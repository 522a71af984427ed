"""A bank holding accounts and a log of completed transactions."""

from __future__ import annotations

import sys
import threading
from datetime import datetime
from typing import Optional, TextIO

from .account import Account
from .transaction import Transaction, TransactionType


def current_time_str() -> str:
    """The local time formatted as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


class Bank:
    """Accounts keyed by id, with thread-safe operations and a transaction log."""

    def __init__(self) -> None:
        self._accounts: dict[int, Account] = {}
        self._transactions: list[Transaction] = []
        self._lock = threading.Lock()
        self._next_account_id = 1

    def create_account(self, initial_balance: float) -> int:
        """Open an account and return its id."""
        with self._lock:
            account_id = self._next_account_id
            self._next_account_id += 1
            self._accounts[account_id] = Account(account_id, initial_balance)
            return account_id

    def get_account(self, account_id: int) -> Optional[Account]:
        with self._lock:
            return self._accounts.get(account_id)

    @property
    def transactions(self) -> list[Transaction]:
        """A snapshot of the transaction log."""
        with self._lock:
            return list(self._transactions)

    def _log(self, transaction: Transaction) -> None:
        with self._lock:
            self._transactions.append(transaction)

    def deposit(self, account_id: int, amount: float) -> None:
        """Deposit into an account; unknown ids are ignored."""
        account = self.get_account(account_id)
        if account is None:
            return
        account.deposit(amount)
        self._log(
            Transaction(TransactionType.DEPOSIT, account_id, None, amount, current_time_str())
        )

    def withdraw(self, account_id: int, amount: float) -> bool:
        account = self.get_account(account_id)
        if account is None or not account.withdraw(amount):
            return False
        self._log(
            Transaction(TransactionType.WITHDRAW, account_id, None, amount, current_time_str())
        )
        return True

    def transfer(self, from_id: int, to_id: int, amount: float) -> bool:
        source = self.get_account(from_id)
        target = self.get_account(to_id)
        if source is None or target is None:
            return False
        if not source.transfer_to(target, amount):
            return False
        self._log(
            Transaction(TransactionType.TRANSFER, from_id, to_id, amount, current_time_str())
        )
        return True

    def summary(self) -> str:
        """A text report of the transaction count and every account's balance."""
        with self._lock:
            lines = [
                "",
                "=== BANK SUMMARY ===",
                f"Total Transactions: {len(self._transactions)}",
                "Accounts:",
            ]
            lines.extend(
                f"ID: {account_id} | Balance: ${account.balance:g}"
                for account_id, account in sorted(self._accounts.items())
            )
        lines.append("====================")
        return "\n".join(lines) + "\n"

    def print_summary(self, file: Optional[TextIO] = None) -> None:
        (file or sys.stdout).write(self.summary())