"""Typed exceptions for invoice mutations."""


class InvoiceError(Exception):
    """Base class for invoice mutation errors."""


class ValidationError(InvoiceError):
    """
    Form input failed validation. Raised before any store access.

    `errors` holds one {"field": ..., "message": ...} entry per failed field.
    """

    def __init__(self, errors: list[dict[str, str]]):
        self.errors = errors
        details = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
        super().__init__(f"Invalid invoice data ({details})")


class NotFoundError(InvoiceError):
    """No invoice matched the id. Only raised when strict not-found mode is enabled."""

    def __init__(self, invoice_id: str):
        self.invoice_id = invoice_id
        super().__init__(f"Invoice {invoice_id} not found")
