from splitshare.models import SimplifiedDebt
from splitshare.services.report import (
    OWED,
    OWES,
    SETTLED,
    build_balance_lines,
    format_balances,
    format_direct_debts,
    format_expense_list,
    format_settlements,
    total_spending,
)


def test_balance_lines_follow_people_order(people):
    lines = build_balance_lines(people, {"c": -5.0, "a": 5.0, "b": 0.004})

    assert [line.name for line in lines] == ["Alice", "Bob", "Charlie"]
    assert [line.status for line in lines] == [OWED, SETTLED, OWES]


def test_format_balances(people, make_expense):
    expenses = [make_expense("a", 30, ["a", "b", "c"])]
    text = format_balances(people, expenses, {"a": 20.0, "b": -10.0, "c": -10.0})

    assert "Total group spending: 30.00" in text
    assert "Alice is owed 20.00" in text
    assert "Bob owes 10.00" in text


def test_format_balances_without_expenses(people):
    assert "No expenses yet" in format_balances(people, [], {})


def test_total_spending(make_expense):
    expenses = [make_expense("a", 30, ["a", "b"], expense_id=1), make_expense("b", 12.5, ["a", "b"], expense_id=2)]
    assert total_spending(expenses) == 42.5


def test_format_settlements(people):
    text = format_settlements(people, [SimplifiedDebt(from_id="b", to_id="x", amount=12.5)])

    assert "Bob → Unknown: 12.50" in text


def test_format_settlements_empty(people):
    assert format_settlements(people, []) == "All settled up! 🎉"


def test_format_direct_debts(people):
    text = format_direct_debts(people, {("b", "a"): 20.0})

    assert "Bob → Alice: 20.00" in text


def test_format_expense_list(people, make_expense):
    expense = make_expense("a", 30, ["a", "b"])
    text = format_expense_list(people, [expense])

    assert "#1 Lunch (01.01.2024)" in text
    assert "paid by Alice, equal split between Alice, Bob" in text
