"""Core domain models."""

from core.models.invoice import (
    FORM_FIELDS,
    MAX_AMOUNT,
    Invoice,
    InvoiceForm,
    InvoiceRecord,
    InvoiceStatus,
    ValidatedInvoice,
)
from core.models.mutation import Mutated, MutatedAndNavigate, MutationResult

__all__ = [
    # Invoice
    "FORM_FIELDS", "MAX_AMOUNT", "Invoice", "InvoiceForm", "InvoiceRecord", "InvoiceStatus", "ValidatedInvoice",
    # Mutation results
    "Mutated", "MutatedAndNavigate", "MutationResult",
]
