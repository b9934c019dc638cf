"""GET /api/invoices: read endpoints backing the invoice listing."""

from fastapi import APIRouter, Query, Request

from api.base import success_response
from core.exceptions import NotFoundError
from core.services.invoice_service import InvoiceMutationService


def create_data_router(service: InvoiceMutationService) -> APIRouter:
    router = APIRouter()

    @router.get("/invoices")
    async def list_invoices(request: Request, limit: int = Query(50, ge=1, le=500)):
        invoices = service.list_invoices(limit)
        return success_response(
            [i.model_dump(mode="json") for i in invoices],
            request_id=getattr(request.state, "request_id", None),
        ).model_dump(mode="json")

    @router.get("/invoices/{invoice_id}")
    async def get_invoice(request: Request, invoice_id: str):
        invoice = service.get_by_id(invoice_id)
        if invoice is None:
            raise NotFoundError(invoice_id)
        return success_response(
            invoice.model_dump(mode="json"),
            request_id=getattr(request.state, "request_id", None),
        ).model_dump(mode="json")

    return router
