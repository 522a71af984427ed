import dataclasses

import pytest

from ledgersim.transaction import Transaction, TransactionType

TS = "2024-01-01 00:00:00"


def test_deposit_string():
    t = Transaction(TransactionType.DEPOSIT, 1, None, 50.0, TS)
    assert str(t) == "[2024-01-01 00:00:00] DEPOSIT: Account 1 +$50"


def test_withdraw_string():
    t = Transaction(TransactionType.WITHDRAW, 2, None, 12.5, TS)
    assert str(t) == "[2024-01-01 00:00:00] WITHDRAW: Account 2 -$12.5"


def test_transfer_string():
    t = Transaction(TransactionType.TRANSFER, 3, 4, 30.0, TS)
    assert str(t) == "[2024-01-01 00:00:00] TRANSFER: Account 3 -> Account 4 $30"


@pytest.mark.parametrize("kind", list(TransactionType))
def test_string_starts_with_timestamp(kind):
    t = Transaction(kind, 1, 2, 10.0, TS)
    assert str(t).startswith(f"[{TS}] ")
    assert kind.name in str(t)


def test_transaction_is_immutable():
    t = Transaction(TransactionType.DEPOSIT, 1, None, 5.0, TS)
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.amount = 10.0  # type: ignore[misc]
    assert t.amount == 5.0
    assert str(t) == "[2024-01-01 00:00:00] DEPOSIT: Account 1 +$5"


def test_equal_fields_compare_equal():
    a = Transaction(TransactionType.TRANSFER, 1, 2, 5.0, TS)
    b = Transaction(TransactionType.TRANSFER, 1, 2, 5.0, TS)
    assert a == b
    assert dataclasses.replace(a, amount=6.0).amount == 6.0