"""Invoice domain models.

Amounts are stored in cents (integer) to avoid floating point issues.
$10.00 = 1000 cents. Callers always submit decimal amounts; conversion to
cents happens in core.money.to_cents.
"""

from datetime import date as date_type
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, StrictStr, field_validator


class InvoiceStatus(str, Enum):
    """Invoice payment status."""

    PENDING = "pending"
    PAID = "paid"


# Keys read from a submitted invoice form. id and date are system-assigned.
FORM_FIELDS = ("customerId", "amount", "status")

# Largest amount whose cents fit the 32-bit INT amount column
MAX_AMOUNT = Decimal("21474836.47")


class InvoiceForm(BaseModel):
    """Raw invoice form submission (create and update share this schema)."""

    customer_id: StrictStr = Field(..., alias="customerId", min_length=1)
    amount: Decimal = Field(..., allow_inf_nan=False, ge=-MAX_AMOUNT, le=MAX_AMOUNT)
    status: InvoiceStatus

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("amount", mode="before")
    @classmethod
    def reject_non_numeric(cls, value: Any) -> Any:
        # bool is an int subclass; "true" in a form is not an amount
        if isinstance(value, bool):
            raise ValueError("Amount must be a number")
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError("Amount is required")
        return value


class ValidatedInvoice(BaseModel):
    """Invoice fields after validation, before unit conversion."""

    customer_id: str
    amount: Decimal
    status: InvoiceStatus

    model_config = {"frozen": True}


class InvoiceRecord(BaseModel):
    """Persistable invoice fields. date is only set for inserts."""

    customer_id: str
    amount_cents: int
    status: InvoiceStatus
    date: str | None = None

    model_config = {"frozen": True}


class Invoice(BaseModel):
    """Full invoice entity as stored."""

    id: str
    customer_id: str
    amount: int  # cents
    status: InvoiceStatus
    date: str

    model_config = {"from_attributes": True}

    @field_validator("id", "customer_id", mode="before")
    @classmethod
    def stringify_uuid(cls, value: Any) -> Any:
        if isinstance(value, UUID):
            return str(value)
        return value

    @field_validator("date", mode="before")
    @classmethod
    def format_date(cls, value: Any) -> Any:
        if isinstance(value, date_type):
            return value.isoformat()
        return value

    @property
    def amount_dollars(self) -> float:
        """Amount in dollars for display."""
        return self.amount / 100

    @property
    def is_paid(self) -> bool:
        """Whether the invoice has been paid."""
        return self.status == InvoiceStatus.PAID
