"""Invoice form actions: create, edit and delete submissions from the dashboard."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, RedirectResponse

from api.base import success_response
from core.models import MutatedAndNavigate, MutationResult
from core.services.invoice_service import InvoiceMutationService


def to_response(request: Request, result: MutationResult, data: dict | None = None):
    """Turn a mutation result into an HTTP response (303 redirect when navigating)."""
    if isinstance(result, MutatedAndNavigate):
        return RedirectResponse(url=result.target, status_code=303)

    request_id = getattr(request.state, "request_id", None)
    return JSONResponse(
        content=success_response(data, request_id=request_id).model_dump(mode="json"),
    )


def create_actions_router(service: InvoiceMutationService) -> APIRouter:
    router = APIRouter()
    listing_path = service.listing_path

    @router.post(f"{listing_path}/create")
    async def create_invoice(request: Request):
        form = await request.form()
        return to_response(request, service.create(form))

    @router.post(f"{listing_path}/{{invoice_id}}/edit")
    async def update_invoice(request: Request, invoice_id: str):
        form = await request.form()
        return to_response(request, service.update(invoice_id, form))

    @router.post(f"{listing_path}/{{invoice_id}}/delete")
    async def delete_invoice(request: Request, invoice_id: str):
        return to_response(request, service.delete(invoice_id), {"deleted": True})

    return router
