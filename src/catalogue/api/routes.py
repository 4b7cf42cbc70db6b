"""FastAPI endpoints for the storefront listing page."""

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from catalogue.product.listing import ProductCatalogue
from localization.bundles import bundle_for
from localization.locale import render_context

router = APIRouter(tags=["storefront"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def get_catalogue(request: Request) -> ProductCatalogue:
    """The per-process catalogue accessor installed on the application."""
    return request.app.state.catalogue


@router.get("/", response_class=HTMLResponse)
async def list_products(request: Request, catalogue: ProductCatalogue = Depends(get_catalogue)):
    listing = catalogue.list_all()
    context = render_context(request)

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "products": listing.products,
            "context": context,
            "messages": bundle_for(context.get("locality")),
            "catalogue_unavailable": not listing.ok,
        },
        status_code=200 if listing.ok else 503,
    )
