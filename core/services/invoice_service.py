"""
Invoice mutations behind the dashboard's invoice forms.

Every mutation follows the same pipeline: validate the raw form fields,
normalize them into a persistable record (decimal amount -> cents), issue a
single parameterized statement, then revalidate the invoice listing view.
Create and update additionally tell the caller to navigate to the listing.
"""

import logging
from typing import Any, Mapping
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError

from clients.postgres_client import PostgresClient
from core.exceptions import NotFoundError, ValidationError
from core.models import (
    FORM_FIELDS,
    Invoice,
    InvoiceForm,
    InvoiceRecord,
    Mutated,
    MutatedAndNavigate,
    ValidatedInvoice,
)
from core.money import to_cents
from core.view_cache import ViewCache
from utils.timezone import today_utc

logger = logging.getLogger(__name__)

DEFAULT_LISTING_PATH = "/dashboard/invoices"


def _first_value(raw: Mapping[str, Any], key: str) -> Any:
    # FormData.get returns the last of repeated keys; forms use the first
    if hasattr(raw, "getlist"):
        return raw.getlist(key)[0]
    return raw.get(key)


def validate(raw: Mapping[str, Any]) -> ValidatedInvoice:
    """
    Validate a raw invoice form.

    Args:
        raw: Key/value bag (dict or starlette FormData). Only customerId,
             amount and status are read; id and date are ignored.

    Returns:
        Validated fields

    Raises:
        ValidationError: Listing every field that failed
    """
    fields = {key: _first_value(raw, key) for key in FORM_FIELDS if key in raw}

    try:
        form = InvoiceForm.model_validate(fields)
    except PydanticValidationError as e:
        errors = [
            {
                "field": ".".join(str(part) for part in err["loc"]) or "form",
                "message": err["msg"],
            }
            for err in e.errors()
        ]
        raise ValidationError(errors) from e

    return ValidatedInvoice(
        customer_id=form.customer_id,
        amount=form.amount,
        status=form.status,
    )


def normalize(validated: ValidatedInvoice, date: str | None = None) -> InvoiceRecord:
    """Convert validated fields into a persistable record."""
    return InvoiceRecord(
        customer_id=validated.customer_id,
        amount_cents=to_cents(validated.amount),
        status=validated.status,
        date=date,
    )


class InvoiceMutationService:
    """Service for invoice form mutations."""

    def __init__(
        self,
        postgres: PostgresClient,
        view_cache: ViewCache,
        listing_path: str = DEFAULT_LISTING_PATH,
        strict_not_found: bool = False,
    ):
        self.postgres = postgres
        self.view_cache = view_cache
        self.listing_path = listing_path
        self.strict_not_found = strict_not_found

    def create(self, raw: Mapping[str, Any]) -> MutatedAndNavigate:
        """
        Create an invoice from form data.

        The store assigns the id; date is today's UTC date. Submitting the
        same form twice creates two invoices.

        Raises:
            ValidationError: If form data is invalid (nothing is written)
        """
        record = normalize(validate(raw), date=today_utc())

        # Always one row; only update/delete inspect the count
        self.postgres.execute_rowcount(
            """
            INSERT INTO invoices (customer_id, amount, status, date)
            VALUES (%s, %s, %s, %s)
            """,
            (record.customer_id, record.amount_cents, record.status.value, record.date)
        )

        logger.info(
            f"Invoice created for customer {record.customer_id}: "
            f"{record.amount_cents} cents, {record.status.value}"
        )

        self.view_cache.revalidate_path(self.listing_path)
        return MutatedAndNavigate(target=self.listing_path)

    def update(self, invoice_id: str | UUID, raw: Mapping[str, Any]) -> MutatedAndNavigate:
        """
        Update customer, amount and status of an invoice. date is never changed.

        An id matching no invoice is a silent no-op unless strict_not_found is set.

        Raises:
            ValidationError: If form data is invalid (nothing is written)
            NotFoundError: If strict_not_found and no invoice matched
        """
        record = normalize(validate(raw))

        affected = self.postgres.execute_rowcount(
            """
            UPDATE invoices
            SET customer_id = %s, amount = %s, status = %s
            WHERE id = %s
            """,
            (record.customer_id, record.amount_cents, record.status.value, invoice_id)
        )
        self._check_found(invoice_id, affected)

        logger.info(f"Invoice {invoice_id} updated ({affected} rows)")

        self.view_cache.revalidate_path(self.listing_path)
        return MutatedAndNavigate(target=self.listing_path)

    def delete(self, invoice_id: str | UUID) -> Mutated:
        """
        Delete an invoice. The caller stays on its current view.

        Raises:
            NotFoundError: If strict_not_found and no invoice matched
        """
        affected = self.postgres.execute_rowcount(
            "DELETE FROM invoices WHERE id = %s",
            (invoice_id,)
        )
        self._check_found(invoice_id, affected)

        logger.info(f"Invoice {invoice_id} deleted ({affected} rows)")

        self.view_cache.revalidate_path(self.listing_path)
        return Mutated()

    def _check_found(self, invoice_id: str | UUID, affected: int) -> None:
        if affected == 0 and self.strict_not_found:
            logger.warning(f"Invoice {invoice_id} not found")
            raise NotFoundError(str(invoice_id))

    def get_by_id(self, invoice_id: str | UUID) -> Invoice | None:
        """Get invoice by ID, None if it doesn't exist."""
        row = self.postgres.execute_single(
            "SELECT id, customer_id, amount, status, date FROM invoices WHERE id = %s",
            (invoice_id,)
        )

        if row is None:
            return None

        return Invoice.model_validate(row)

    def list_invoices(self, limit: int = 50) -> list[Invoice]:
        """
        List invoices newest first, memoized under the listing path.

        Args:
            limit: Maximum results

        Returns:
            Invoices ordered by date DESC
        """
        def load() -> list[dict]:
            rows = self.postgres.execute(
                """
                SELECT id, customer_id, amount, status, date
                FROM invoices
                ORDER BY date DESC
                LIMIT %s
                """,
                (limit,)
            )
            return [Invoice.model_validate(row).model_dump(mode="json") for row in rows]

        data = self.view_cache.get_or_compute(self.listing_path, load, variant=f"limit={limit}")
        return [Invoice.model_validate(item) for item in data]
