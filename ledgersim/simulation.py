"""Concurrent simulation of users operating on a shared bank."""

from __future__ import annotations

import argparse
import random
import threading
import time
from typing import Callable, Optional, Sequence

from .bank import Bank


def simulate_user(
    bank: Bank,
    my_id: int,
    other_id: int,
    iterations: int,
    rng: Optional[random.Random] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Perform ``iterations`` random deposits, withdrawals and transfers."""
    rng = rng or random.Random()
    for _ in range(iterations):
        op = rng.randint(0, 2)
        amount = float(rng.randint(10, 100))
        if op == 0:
            bank.deposit(my_id, amount)
        elif op == 1:
            bank.withdraw(my_id, amount)
        else:
            bank.transfer(my_id, other_id, amount)
        sleep(rng.randint(1, 10) / 1000)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run a concurrent banking simulation and print a summary."
    )
    parser.parse_args(argv)

    print("Initing Banking System...", flush=True)
    bank = Bank()
    acc1, acc2, acc3, acc4 = (bank.create_account(1000.0) for _ in range(4))
    print("Accounts created. Starting simulation...", flush=True)

    pairs = [(acc1, acc2), (acc2, acc1), (acc3, acc4), (acc4, acc3)]
    threads = [
        threading.Thread(target=simulate_user, args=(bank, mine, other, 100))
        for mine, other in pairs
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    print("Simulation complete.", flush=True)
    bank.print_summary()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())