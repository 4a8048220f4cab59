"""Greedy debt simplification.

Debtors and creditors are both sorted largest first and matched with two
cursors. Every step clears at least one side, so the result has at most
``debtors + creditors - 1`` transfers. This is not guaranteed to be the
minimum possible number of transfers: finding that is an NP-hard partition
problem. For {-4, -3, -3, +6, +4} the walk emits four transfers, while
pairing -4 with +4 and both -3 with +6 needs only three.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Mapping

from splitshare.models import SimplifiedDebt

# Balances at or below this magnitude count as settled. Custom split
# validation compares against the same value.
SETTLEMENT_TOLERANCE = 0.01

_EPSILON = 1e-9


def round_amount(value: float) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def to_cents(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP) * 100)


def is_settled(balance: float) -> bool:
    return abs(balance) <= SETTLEMENT_TOLERANCE + _EPSILON


def simplify_debts(balances: Mapping[str, float]) -> List[SimplifiedDebt]:
    # The walk runs on integer cents so remainders never drift below a cent.
    creditors: list[tuple[str, int]] = []
    debtors: list[tuple[str, int]] = []

    for person_id, balance in balances.items():
        if is_settled(balance):
            continue
        cents = to_cents(balance)
        if cents > 0:
            creditors.append((person_id, cents))
        elif cents < 0:
            debtors.append((person_id, -cents))

    creditors.sort(key=lambda x: x[1], reverse=True)
    debtors.sort(key=lambda x: x[1], reverse=True)

    settlements: list[SimplifiedDebt] = []
    i, j = 0, 0

    while i < len(debtors) and j < len(creditors):
        debt_id, debt_cents = debtors[i]
        cred_id, cred_cents = creditors[j]

        amount_cents = min(debt_cents, cred_cents)
        settlements.append(SimplifiedDebt(from_id=debt_id, to_id=cred_id, amount=amount_cents / 100))

        debt_cents -= amount_cents
        cred_cents -= amount_cents

        if debt_cents == 0:
            i += 1
        else:
            debtors[i] = (debt_id, debt_cents)

        if cred_cents == 0:
            j += 1
        else:
            creditors[j] = (cred_id, cred_cents)

    return settlements
