from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Mapping, Optional


class SplitType(str, Enum):
    EQUAL = "equal"
    CUSTOM = "custom"


@dataclass(slots=True, frozen=True)
class Person:
    id: str
    name: str


@dataclass(slots=True, frozen=True)
class Expense:
    id: int
    description: str
    amount: float
    paid_by: str
    split_between: tuple[str, ...]
    spent_on: date
    split_type: SplitType = SplitType.EQUAL
    custom_amounts: Optional[Mapping[str, float]] = None


@dataclass(slots=True)
class ExpenseDraft:
    """Unvalidated expense fields as collected from user input."""

    description: str = ""
    amount: Optional[float] = None
    paid_by: Optional[str] = None
    split_between: list[str] = field(default_factory=list)
    spent_on: Optional[date] = None
    split_type: SplitType = SplitType.EQUAL
    custom_amounts: dict[str, float] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class SimplifiedDebt:
    from_id: str
    to_id: str
    amount: float
