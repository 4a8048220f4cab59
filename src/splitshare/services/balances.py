from __future__ import annotations

from typing import Iterable, Sequence

from splitshare.models import Expense, Person, SplitType


def expense_shares(expense: Expense) -> dict[str, float]:
    """Per-person debit of a single expense.

    Equal splits divide the amount evenly over ``split_between`` (payer
    included when listed). Custom splits debit ``custom_amounts`` for the
    listed participants only; a participant missing from ``custom_amounts``
    is not debited.
    """
    if expense.split_type == SplitType.EQUAL:
        if not expense.split_between:
            return {}
        share = expense.amount / len(expense.split_between)
        shares: dict[str, float] = {}
        for person_id in expense.split_between:
            shares[person_id] = shares.get(person_id, 0.0) + share
        return shares

    custom = expense.custom_amounts or {}
    return {
        person_id: custom[person_id]
        for person_id in expense.split_between
        if person_id in custom
    }


def calculate_balances(people: Iterable[Person], expenses: Sequence[Expense]) -> dict[str, float]:
    # Positive balance: the group owes this person. Unknown ids are ignored.
    balances: dict[str, float] = {person.id: 0.0 for person in people}
    for expense in expenses:
        if expense.paid_by in balances:
            balances[expense.paid_by] += expense.amount
        for person_id, share in expense_shares(expense).items():
            if person_id in balances:
                balances[person_id] -= share
    return balances


def direct_debts(expenses: Sequence[Expense]) -> dict[tuple[str, str], float]:
    """Pairwise ``(debtor, creditor) -> amount`` before any simplification."""
    debts: dict[tuple[str, str], float] = {}
    for expense in expenses:
        for person_id, share in expense_shares(expense).items():
            if person_id == expense.paid_by:
                continue
            key = (person_id, expense.paid_by)
            debts[key] = debts.get(key, 0.0) + share
    return debts
