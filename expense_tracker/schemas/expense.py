"""Expense Schemas - Pydantic models for the expense API boundary.

Invariants:
    - ExpenseCreate ignores any client-supplied id (extra fields dropped)
    - Dates are parsed by core.expense_dates; failures surface as 400 validation errors
    - ExpenseUpdate fields are all optional; only fields the client actually sent
      reach the store (model_dump(exclude_unset=True))
    - ExpenseCreate reads an explicit null as the field's zero value ("" or 0.0)
    - Explicit null is rejected for every update field except date (null clears it)
    - amount must be a JSON number; strings and booleans are rejected
    - ExpenseResponse renders date as "YYYY-MM-DDTHH:MM:SSZ" or null

Design Decisions:
    - Partial updates use model_dump(exclude_unset=True); "" and 0.0 are ordinary values
    - field_validator(mode="before") for dates: runs before Pydantic's own datetime
      parsing so the incomplete "YYYY-MM-DDTHH:MM" shape gets exact-format handling
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictFloat, field_serializer, field_validator

from expense_tracker.core.expense_dates import parse_expense_date, render_expense_date


class ExpenseCreate(BaseModel):
    """Expense creation payload - every field optional, zero-valued by default."""
    title: str = ""
    description: str = ""
    category: str = ""
    amount: StrictFloat = 0.0
    date: datetime | None = None

    @field_validator("title", "description", "category", mode="before")
    @classmethod
    def null_text_as_empty(cls, v: object) -> object:
        return "" if v is None else v

    @field_validator("amount", mode="before")
    @classmethod
    def null_amount_as_zero(cls, v: object) -> object:
        return 0.0 if v is None else v

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: object) -> datetime | None:
        if v is None:
            return None
        return parse_expense_date(v)


class ExpenseUpdate(BaseModel):
    """Merge/patch payload - absent fields keep their stored value."""
    title: str | None = None
    description: str | None = None
    category: str | None = None
    amount: StrictFloat | None = None
    date: datetime | None = None

    @field_validator("title", "description", "category", "amount", mode="before")
    @classmethod
    def reject_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("field cannot be null")
        return v

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: object) -> datetime | None:
        if v is None:
            return None
        return parse_expense_date(v)

    def changes(self) -> dict:
        """Field-name -> new value for the fields present in the request."""
        return self.model_dump(exclude_unset=True)


class ExpenseResponse(BaseModel):
    """Expense response - public-facing record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    category: str
    amount: float
    date: datetime | None = None

    @field_serializer("date")
    def serialize_date(self, v: datetime | None) -> str | None:
        return render_expense_date(v)


class MessageResponse(BaseModel):
    message: str
