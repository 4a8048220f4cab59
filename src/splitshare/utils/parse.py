from __future__ import annotations

import re
from datetime import date, datetime
from typing import Sequence

from splitshare.models import ExpenseDraft, Person, SplitType

DATE_FORMATS = ("%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y")

EXPENSE_USAGE = (
    "Usage: /addexpense [description] | [amount] | [payer] | [participants] | [date]\n"
    "Participants: names separated by commas or spaces, all, "
    "or name=amount pairs for a custom split. The date is optional."
)


def parse_amount(text: str) -> float:
    cleaned = text.strip().replace(",", ".")
    if not re.fullmatch(r"-?\d+(\.\d+)?", cleaned):
        raise ValueError(f"Invalid amount: {text.strip() or 'empty'}")
    return float(cleaned)


def parse_expense_date(text: str, today: date) -> date:
    value = text.strip().lower()
    if not value or value == "today":
        return today
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise ValueError("Could not read the date. Use YYYY-MM-DD or DD.MM.YYYY")


def resolve_person(name: str, people: Sequence[Person]) -> Person:
    wanted = name.strip().lower()
    for person in people:
        if person.name.lower() == wanted:
            return person
    raise ValueError(f"Unknown person: {name.strip()}")


def _split_names(text: str, people: Sequence[Person]) -> list[str]:
    if "," in text:
        return [part.strip() for part in text.split(",") if part.strip()]

    # Without commas, take the longest run of words that names a known person.
    known = {person.name.lower() for person in people}
    tokens = text.split()
    entries: list[str] = []
    start = 0
    while start < len(tokens):
        end = start + 1
        for stop in range(len(tokens), start, -1):
            if any("=" in token for token in tokens[start : stop - 1]):
                continue
            candidate = " ".join(tokens[start:stop])
            if candidate.partition("=")[0].strip().lower() in known:
                end = stop
                break
        entries.append(" ".join(tokens[start:end]))
        start = end
    return entries


def parse_expense_command(text: str, people: Sequence[Person], today: date) -> ExpenseDraft:
    parts = [part.strip() for part in text.split("|")]
    if len(parts) < 4:
        raise ValueError(EXPENSE_USAGE)

    draft = ExpenseDraft(description=parts[0])
    draft.amount = parse_amount(parts[1]) if parts[1] else None
    draft.paid_by = resolve_person(parts[2], people).id if parts[2] else None
    draft.spent_on = parse_expense_date(parts[4] if len(parts) > 4 else "", today)

    participants = parts[3]
    if participants.lower() == "all":
        draft.split_between = [person.id for person in people]
        return draft

    entries = _split_names(participants, people)
    if any("=" in entry for entry in entries):
        draft.split_type = SplitType.CUSTOM
        for entry in entries:
            name, sep, amount = entry.partition("=")
            if not sep:
                raise ValueError(f"Custom split needs an amount for {name.strip()}")
            person = resolve_person(name, people)
            if person.id not in draft.split_between:
                draft.split_between.append(person.id)
            draft.custom_amounts[person.id] = parse_amount(amount)
        return draft

    for name in entries:
        person = resolve_person(name, people)
        if person.id not in draft.split_between:
            draft.split_between.append(person.id)
    return draft


def command_args(text: str) -> str:
    """Everything after the leading /command token."""
    parts = text.strip().split(maxsplit=1)
    return parts[1].strip() if len(parts) > 1 else ""
