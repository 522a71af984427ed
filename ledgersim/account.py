"""A thread-safe bank account."""

from __future__ import annotations

import threading


class Account:
    """An account whose balance may be changed from several threads."""

    def __init__(self, account_id: int, balance: float) -> None:
        self._account_id = account_id
        self._balance = balance
        self._lock = threading.Lock()

    @property
    def account_id(self) -> int:
        return self._account_id

    @property
    def balance(self) -> float:
        with self._lock:
            return self._balance

    @property
    def lock(self) -> threading.Lock:
        """The lock guarding this account's balance."""
        return self._lock

    def deposit(self, amount: float) -> None:
        with self._lock:
            self._balance += amount

    def withdraw(self, amount: float) -> bool:
        """Take ``amount`` out if the balance covers it; report success."""
        with self._lock:
            if self._balance >= amount:
                self._balance -= amount
                return True
            return False

    def transfer_to(self, target: Account, amount: float) -> bool:
        """Move ``amount`` to ``target`` atomically; report success."""
        if target is self:
            return False
        # A fixed acquisition order keeps opposing transfers from deadlocking.
        first, second = sorted((self, target), key=id)
        with first._lock, second._lock:
            if self._balance >= amount:
                self._balance -= amount
                target._balance += amount
                return True
            return False

    def __repr__(self) -> str:
        return f"Account(account_id={self._account_id!r}, balance={self.balance!r})"