"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - ExpenseId wraps the integer primary key assigned by the store
    - Date-defaulting policies encoded as an Enum - no raw string matching

Design Decisions:
    - ExpenseId is a NewType, not a wrapper class
    - DateDefault is a str Enum, parsed from EXPENSE_DATE_DEFAULT
"""

from enum import Enum
from typing import NewType


ExpenseId = NewType("ExpenseId", int)


class DateDefault(str, Enum):
    """What happens to `date` when a create request omits it."""
    UNSET = "unset"  # stays null
    NOW = "now"      # server time at creation
