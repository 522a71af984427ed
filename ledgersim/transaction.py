"""Records of completed banking operations."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class TransactionType(enum.Enum):
    """Kind of operation a transaction records."""

    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    TRANSFER = "transfer"


@dataclass(frozen=True, slots=True)
class Transaction:
    """An immutable record of one successful operation on the bank."""

    type: TransactionType
    from_id: int
    to_id: Optional[int]
    amount: float
    timestamp: str

    def __str__(self) -> str:
        prefix = f"[{self.timestamp}] "
        amount = f"{self.amount:g}"
        if self.type is TransactionType.DEPOSIT:
            return f"{prefix}DEPOSIT: Account {self.from_id} +${amount}"
        if self.type is TransactionType.WITHDRAW:
            return f"{prefix}WITHDRAW: Account {self.from_id} -${amount}"
        return (
            f"{prefix}TRANSFER: Account {self.from_id} -> "
            f"Account {self.to_id} ${amount}"
        )