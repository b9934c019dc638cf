"""Tests for core/exceptions.py."""

from core.exceptions import InvoiceError, NotFoundError, ValidationError


class TestValidationError:

    def test_carries_field_errors(self):
        errors = [{"field": "status", "message": "bad"}, {"field": "amount", "message": "worse"}]
        exc = ValidationError(errors)

        assert exc.errors == errors
        assert "status: bad" in str(exc)
        assert "amount: worse" in str(exc)
        assert isinstance(exc, InvoiceError)

    def test_is_not_a_value_error(self):
        """Handled by its own API handler, not the generic 400 path."""
        assert not isinstance(ValidationError([]), ValueError)


class TestNotFoundError:

    def test_message_names_invoice(self):
        exc = NotFoundError("inv-9")
        assert exc.invoice_id == "inv-9"
        assert str(exc) == "Invoice inv-9 not found"
