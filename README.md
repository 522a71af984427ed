# ledgersim

A small in-memory bank ledger whose accounts can be shared safely between
threads. It also includes a simulation that runs several concurrent users
against the ledger.

## Installation

```
pip install .
```

## Using the library

```python
from ledgersim.bank import Bank

bank = Bank()
alice = bank.create_account(100.0)
bob = bank.create_account(50.0)

bank.deposit(alice, 25.0)
bank.withdraw(bob, 10.0)          # True when funds suffice, False otherwise
bank.transfer(alice, bob, 30.0)   # True when the transfer went through

print(bank.get_account(alice).balance)   # 95.0
print(bank.get_account(bob).balance)     # 70.0
for entry in bank.transactions:
    print(entry)   # e.g. "[2024-01-01 12:00:00] TRANSFER: Account 1 -> Account 2 $30"

bank.print_summary()              # writes to stdout; pass file=... to redirect
report = bank.summary()           # the same report as a string
```

### `ledgersim.account.Account`

- `Account(account_id, balance)` creates an account.
- `account_id` and `balance` are read-only properties.
- `deposit(amount)` adds to the balance.
- `withdraw(amount)` takes money out only when the balance covers the amount,
  and returns whether it did.
- `transfer_to(target, amount)` moves money to another account in one atomic
  step. It locks both accounts in a fixed order, so two transfers running in
  opposite directions cannot deadlock. A transfer to the same account is
  refused and returns `False`.
- `lock` is the `threading.Lock` that guards the balance.

### `ledgersim.bank.Bank`

- `create_account(initial_balance)` returns a new account id. Ids start at 1.
- `get_account(account_id)` returns the `Account`, or `None` if the id is
  unknown.
- `deposit`, `withdraw` and `transfer` work on account ids. Each operation
  that succeeds is recorded as a `Transaction` stamped with the local time
  (`current_time_str()`, format `YYYY-MM-DD HH:MM:SS`).
- If a withdrawal or transfer would overdraw an account, it is refused and
  returns `False`. No balance changes and nothing is recorded.
- An operation on an unknown id does nothing. `withdraw` and `transfer` return
  `False` in that case.
- `transactions` is a property that returns a snapshot list of the log.

### `ledgersim.transaction`

- `TransactionType` has the members `DEPOSIT`, `WITHDRAW` and `TRANSFER`.
- `Transaction` is a frozen dataclass with the fields `type`, `from_id`,
  `to_id` (`None` except for transfers), `amount` and `timestamp`.
- `str()` of a transaction gives a one-line description.

## Running the simulation

```
ledgersim
```

The command creates four accounts of 1000.0 each and starts four threads.
Accounts 1 and 2 are paired, and so are accounts 3 and 4. Each thread performs
100 random operations on its account. An operation is a deposit, a withdrawal,
or a transfer to the paired account, for a whole amount between 10 and 100.
After each operation the thread pauses for 1–10 ms. When all threads have
finished, the command prints a summary with the number of transactions and
every account's balance. The command takes no options other than `--help`.

You can also call `ledgersim.simulation.simulate_user(bank, my_id, other_id,
iterations, rng=None, sleep=time.sleep)` directly. Pass a seeded
`random.Random` and a no-op `sleep` to make a run reproducible and fast.

## What it does not do

Everything is kept in memory. Accounts and the transaction log are not stored
anywhere, and they are lost when the process ends. There is no interactive
interface, and the command does not accept user-chosen accounts or amounts.

## Tests

```
pip install .[test]
pytest
```