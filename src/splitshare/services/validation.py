from __future__ import annotations

import re
from typing import Iterable, Sequence, Union

from splitshare.models import Expense, ExpenseDraft, Person, SplitType
from splitshare.services.settlement import SETTLEMENT_TOLERANCE

NAME_PATTERN = re.compile(r"^[A-Za-z\s'-]+$")


SplitLike = Union[Expense, ExpenseDraft]


class ValidationError(ValueError):
    pass


class MissingFieldsError(ValidationError):
    def __init__(self, fields: Sequence[str]) -> None:
        self.fields = list(fields)
        super().__init__("Missing required details: " + ", ".join(self.fields))


class PersonInUseError(ValidationError):
    pass


class LastPersonError(ValidationError):
    pass


def validate_person_name(name: str, people: Iterable[Person]) -> str:
    trimmed = name.strip()
    if not trimmed:
        raise ValidationError("Please enter a name to add a person.")
    if not NAME_PATTERN.match(trimmed):
        raise ValidationError("Names may only contain letters, spaces, hyphens and apostrophes.")
    if any(person.name.lower() == trimmed.lower() for person in people):
        raise ValidationError(f'"{trimmed}" is already in the group. Please use a unique name.')
    return trimmed


def is_person_referenced(person_id: str, expenses: Iterable[Expense]) -> bool:
    return any(
        expense.paid_by == person_id or person_id in expense.split_between
        for expense in expenses
    )


def assert_person_removable(person_id: str, people: Sequence[Person], expenses: Iterable[Expense]) -> None:
    if is_person_referenced(person_id, expenses):
        raise PersonInUseError(
            "This person is involved in existing expenses. Delete those expenses first."
        )
    if len(people) <= 1:
        raise LastPersonError("The group must keep at least one member.")


def custom_total(split: SplitLike) -> float:
    custom = split.custom_amounts or {}
    return sum(custom.get(person_id, 0.0) for person_id in split.split_between)


def validate_expense_split(split: SplitLike) -> bool:
    if not split.split_between:
        return False
    if split.split_type == SplitType.EQUAL:
        return True
    return abs(custom_total(split) - (split.amount or 0.0)) <= SETTLEMENT_TOLERANCE


def validate_expense(draft: ExpenseDraft, people: Sequence[Person]) -> None:
    """Check a draft before it reaches the ledger.

    Raises ``MissingFieldsError`` listing every absent field at once, or
    ``ValidationError`` for the first rule the draft breaks.
    """
    if len(people) < 2:
        raise ValidationError("You need at least 2 people to split expenses.")

    names = {person.id: person.name for person in people}
    custom_mode = draft.split_type == SplitType.CUSTOM

    missing: list[str] = []
    if not draft.description.strip():
        missing.append("description")
    if not draft.amount:
        missing.append("amount")
    if draft.spent_on is None:
        missing.append("date")
    if not draft.paid_by:
        missing.append("payer")
    if not draft.split_between:
        missing.append("at least one person to split with")
    if custom_mode:
        for person_id in draft.split_between:
            value = draft.custom_amounts.get(person_id)
            if not value or value <= 0:
                missing.append(f"custom amount for {names.get(person_id, 'Unknown')}")
    if missing:
        raise MissingFieldsError(missing)

    assert draft.amount is not None
    unknown = [pid for pid in [draft.paid_by, *draft.split_between, *draft.custom_amounts] if pid not in names]
    if unknown:
        raise ValidationError("Expense refers to people who are not in the group.")

    if draft.amount <= 0:
        raise ValidationError("The expense amount must be greater than zero.")

    if not custom_mode and len(draft.split_between) < 2:
        raise ValidationError("An equal split must involve at least 2 people.")

    if custom_mode and list(draft.split_between) == [draft.paid_by]:
        raise ValidationError("You cannot split an expense only with yourself.")

    if custom_mode and not validate_expense_split(draft):
        total = custom_total(draft)
        raise ValidationError(
            f"Custom amounts add up to {total:.2f} but the expense total is {draft.amount:.2f} "
            f"(difference {draft.amount - total:.2f})."
        )
