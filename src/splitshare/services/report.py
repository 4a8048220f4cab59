from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Iterable, Mapping, Sequence

from splitshare.models import Expense, Person, SimplifiedDebt, SplitType
from splitshare.services.settlement import SETTLEMENT_TOLERANCE

OWED = "owed"
OWES = "owes"
SETTLED = "settled"

STATUS_LABELS = {
    OWED: "is owed",
    OWES: "owes",
    SETTLED: "settled",
}


@dataclass(slots=True)
class BalanceLine:
    name: str
    amount: float
    status: str


def total_spending(expenses: Iterable[Expense]) -> float:
    return sum(expense.amount for expense in expenses)


def balance_status(amount: float) -> str:
    if amount > SETTLEMENT_TOLERANCE:
        return OWED
    if amount < -SETTLEMENT_TOLERANCE:
        return OWES
    return SETTLED


def build_balance_lines(people: Sequence[Person], balances: Mapping[str, float]) -> list[BalanceLine]:
    lines: list[BalanceLine] = []
    for person in people:
        amount = balances.get(person.id, 0.0)
        lines.append(BalanceLine(name=person.name, amount=amount, status=balance_status(amount)))
    return lines


def _names(people: Iterable[Person]) -> dict[str, str]:
    return {person.id: person.name for person in people}


def format_balances(people: Sequence[Person], expenses: Sequence[Expense], balances: Mapping[str, float]) -> str:
    if not expenses:
        return "No expenses yet. Add one to see who owes whom."

    lines = [
        "<b>Balances</b>",
        f"Total group spending: {total_spending(expenses):.2f}",
        "",
    ]
    for line in build_balance_lines(people, balances):
        if line.status == SETTLED:
            lines.append(f"• {escape(line.name)}: settled")
        else:
            lines.append(f"• {escape(line.name)} {STATUS_LABELS[line.status]} {abs(line.amount):.2f}")
    return "\n".join(lines)


def format_settlements(people: Sequence[Person], settlements: Sequence[SimplifiedDebt]) -> str:
    if not settlements:
        return "All settled up! 🎉"

    names = _names(people)
    lines = ["<b>Suggested settlements</b>"]
    for debt in settlements:
        debtor = escape(names.get(debt.from_id, "Unknown"))
        creditor = escape(names.get(debt.to_id, "Unknown"))
        lines.append(f"• {debtor} → {creditor}: {debt.amount:.2f}")
    return "\n".join(lines)


def format_direct_debts(people: Sequence[Person], debts: Mapping[tuple[str, str], float]) -> str:
    if not debts:
        return "Nobody owes anybody yet."

    names = _names(people)
    lines = ["<b>Who owes whom, per expense</b>"]
    for (debtor_id, creditor_id), amount in debts.items():
        debtor = escape(names.get(debtor_id, "Unknown"))
        creditor = escape(names.get(creditor_id, "Unknown"))
        lines.append(f"• {debtor} → {creditor}: {amount:.2f}")
    return "\n".join(lines)


def format_expense_list(people: Sequence[Person], expenses: Sequence[Expense]) -> str:
    if not expenses:
        return "No expenses recorded yet."

    names = _names(people)
    lines = ["<b>Expense history</b>"]
    for expense in expenses:
        payer = escape(names.get(expense.paid_by, "Unknown"))
        participants = ", ".join(escape(names.get(pid, "Unknown")) for pid in expense.split_between)
        split = "equal" if expense.split_type == SplitType.EQUAL else "custom"
        lines.append(
            f"• #{expense.id} {escape(expense.description)} ({expense.spent_on:%d.%m.%Y}) — "
            f"{expense.amount:.2f}, paid by {payer}, {split} split between {participants}"
        )
    return "\n".join(lines)
