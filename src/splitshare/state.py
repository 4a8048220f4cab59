"""In-memory ledgers, one per chat."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Optional

from splitshare.logging import get_logger
from splitshare.models import Expense, ExpenseDraft, Person, SplitType
from splitshare.services.validation import (
    assert_person_removable,
    validate_expense,
    validate_person_name,
)


@dataclass(slots=True)
class GroupLedger:
    people: list[Person] = field(default_factory=list)
    expenses: list[Expense] = field(default_factory=list)
    next_expense_id: int = 1


class LedgerStateManager:
    def __init__(self) -> None:
        self._ledgers: dict[int, GroupLedger] = {}
        self._log = get_logger(__name__)

    def _ledger(self, chat_id: int) -> GroupLedger:
        return self._ledgers.setdefault(chat_id, GroupLedger())

    def people(self, chat_id: int) -> tuple[Person, ...]:
        return tuple(self._ledger(chat_id).people)

    def expenses(self, chat_id: int) -> tuple[Expense, ...]:
        return tuple(self._ledger(chat_id).expenses)

    def find_person(self, chat_id: int, person_id: str) -> Optional[Person]:
        for person in self._ledger(chat_id).people:
            if person.id == person_id:
                return person
        return None

    def get_expense(self, chat_id: int, expense_id: int) -> Optional[Expense]:
        for expense in self._ledger(chat_id).expenses:
            if expense.id == expense_id:
                return expense
        return None

    def add_person(self, chat_id: int, name: str) -> Person:
        ledger = self._ledger(chat_id)
        clean_name = validate_person_name(name, ledger.people)
        person = Person(id=uuid.uuid4().hex, name=clean_name)
        ledger.people.append(person)
        self._log.info("ledger.person.added", chat_id=chat_id, person_id=person.id)
        return person

    def remove_person(self, chat_id: int, person_id: str) -> Person:
        ledger = self._ledger(chat_id)
        person = self.find_person(chat_id, person_id)
        if person is None:
            raise KeyError(person_id)
        assert_person_removable(person_id, ledger.people, ledger.expenses)
        ledger.people.remove(person)
        self._log.info("ledger.person.removed", chat_id=chat_id, person_id=person_id)
        return person

    def add_expense(self, chat_id: int, draft: ExpenseDraft) -> Expense:
        ledger = self._ledger(chat_id)
        validate_expense(draft, ledger.people)
        assert draft.amount is not None and draft.paid_by is not None and draft.spent_on is not None

        custom = draft.split_type == SplitType.CUSTOM
        expense = Expense(
            id=ledger.next_expense_id,
            description=draft.description.strip(),
            amount=draft.amount,
            paid_by=draft.paid_by,
            split_between=tuple(draft.split_between),
            spent_on=draft.spent_on,
            split_type=draft.split_type,
            custom_amounts=dict(draft.custom_amounts) if custom else None,
        )
        ledger.next_expense_id += 1
        ledger.expenses.append(expense)
        self._log.info("ledger.expense.added", chat_id=chat_id, expense_id=expense.id, amount=expense.amount)
        return expense

    def remove_expense(self, chat_id: int, expense_id: int) -> Expense:
        expense = self.get_expense(chat_id, expense_id)
        if expense is None:
            raise KeyError(expense_id)
        self._ledger(chat_id).expenses.remove(expense)
        self._log.info("ledger.expense.removed", chat_id=chat_id, expense_id=expense_id)
        return expense

    def clear(self, chat_id: int) -> None:
        self._ledgers.pop(chat_id, None)


state = LedgerStateManager()
