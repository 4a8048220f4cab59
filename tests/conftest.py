from datetime import date

import pytest

from splitshare.models import Expense, Person, SplitType


@pytest.fixture
def people() -> list[Person]:
    return [Person("a", "Alice"), Person("b", "Bob"), Person("c", "Charlie")]


@pytest.fixture
def make_expense():
    def factory(
        paid_by: str,
        amount: float,
        split_between: list[str],
        custom_amounts: dict[str, float] | None = None,
        expense_id: int = 1,
    ) -> Expense:
        return Expense(
            id=expense_id,
            description="Lunch",
            amount=amount,
            paid_by=paid_by,
            split_between=tuple(split_between),
            spent_on=date(2024, 1, 1),
            split_type=SplitType.CUSTOM if custom_amounts is not None else SplitType.EQUAL,
            custom_amounts=custom_amounts,
        )

    return factory
