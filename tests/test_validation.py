from datetime import date

import pytest

from splitshare.models import ExpenseDraft, Person, SplitType
from splitshare.services.validation import (
    LastPersonError,
    MissingFieldsError,
    PersonInUseError,
    ValidationError,
    assert_person_removable,
    validate_expense,
    validate_expense_split,
    validate_person_name,
)


def _draft(**overrides) -> ExpenseDraft:
    values = dict(
        description="Dinner",
        amount=100.0,
        paid_by="a",
        split_between=["a", "b"],
        spent_on=date(2024, 1, 1),
    )
    values.update(overrides)
    return ExpenseDraft(**values)


def test_person_name_is_trimmed(people):
    assert validate_person_name("  Dave ", people) == "Dave"


@pytest.mark.parametrize("name", ["", "   ", "R2D2", "Eve!"])
def test_person_name_rejected(people, name):
    with pytest.raises(ValidationError):
        validate_person_name(name, people)


def test_person_name_duplicate_is_case_insensitive(people):
    with pytest.raises(ValidationError, match="already"):
        validate_person_name("alice", people)


def test_person_name_allows_hyphen_and_apostrophe(people):
    assert validate_person_name("Mary-Jane O'Neil", people) == "Mary-Jane O'Neil"


def test_remove_person_in_use(people, make_expense):
    expenses = [make_expense("a", 30, ["b", "c"])]

    with pytest.raises(PersonInUseError):
        assert_person_removable("a", people, expenses)
    with pytest.raises(PersonInUseError):
        assert_person_removable("c", people, expenses)


def test_remove_last_person():
    with pytest.raises(LastPersonError):
        assert_person_removable("a", [Person("a", "Alice")], [])


def test_remove_free_person(people, make_expense):
    assert_person_removable("c", people, [make_expense("a", 30, ["a", "b"])])


def test_validate_expense_split_equal():
    assert validate_expense_split(_draft()) is True
    assert validate_expense_split(_draft(split_between=[])) is False


def test_validate_expense_split_custom_match():
    draft = _draft(
        split_type=SplitType.CUSTOM,
        split_between=["a", "b", "c"],
        custom_amounts={"a": 25, "b": 35, "c": 40},
    )
    assert validate_expense_split(draft) is True


def test_validate_expense_split_custom_mismatch():
    draft = _draft(split_type=SplitType.CUSTOM, custom_amounts={"a": 30, "b": 30})
    assert validate_expense_split(draft) is False


def test_validate_expense_split_within_tolerance():
    draft = _draft(amount=10.0, split_type=SplitType.CUSTOM, custom_amounts={"a": 3.33, "b": 6.67})
    assert validate_expense_split(draft) is True


def test_validate_expense_accepts_valid_draft(people):
    validate_expense(_draft(), people)


def test_validate_expense_needs_two_people():
    with pytest.raises(ValidationError, match="at least 2 people"):
        validate_expense(_draft(), [Person("a", "Alice")])


def test_validate_expense_collects_missing_fields(people):
    draft = ExpenseDraft(split_type=SplitType.CUSTOM, split_between=["b"])

    with pytest.raises(MissingFieldsError) as exc_info:
        validate_expense(draft, people)

    assert exc_info.value.fields == [
        "description",
        "amount",
        "date",
        "payer",
        "custom amount for Bob",
    ]


def test_validate_expense_rejects_negative_amount(people):
    with pytest.raises(ValidationError, match="greater than zero"):
        validate_expense(_draft(amount=-5.0), people)


def test_validate_expense_equal_split_needs_two(people):
    with pytest.raises(ValidationError, match="equal split"):
        validate_expense(_draft(split_between=["b"]), people)


def test_validate_expense_custom_self_split(people):
    draft = _draft(split_type=SplitType.CUSTOM, split_between=["a"], custom_amounts={"a": 100})

    with pytest.raises(ValidationError, match="only with yourself"):
        validate_expense(draft, people)


def test_validate_expense_custom_mismatch_reports_difference(people):
    draft = _draft(split_type=SplitType.CUSTOM, custom_amounts={"a": 30, "b": 30})

    with pytest.raises(ValidationError, match="difference 40.00"):
        validate_expense(draft, people)


def test_validate_expense_unknown_person(people):
    with pytest.raises(ValidationError, match="not in the group"):
        validate_expense(_draft(split_between=["a", "zed"]), people)
