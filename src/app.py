"""ShopFront FastAPI application.

Serves the product listing page and the language switch route. Every
request runs inside the catalogue domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied:
#   - "test"       : in-memory database
#   - "production" : PostgreSQL at DATABASE_URL
from catalogue.domain import catalogue
from fastapi import FastAPI, Request

catalogue.init()

from catalogue.api import router as catalogue_router  # noqa: E402
from catalogue.api.schemas import HealthResponse  # noqa: E402
from catalogue.product.listing import ProductCatalogue  # noqa: E402
from catalogue.utils.logging import add_context, clear_context  # noqa: E402
from localization.api import router as localization_router  # noqa: E402
from localization.locale import LocaleMiddleware  # noqa: E402

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="ShopFront",
    description="Storefront: localized product listing",
)

# One stateless accessor per process, injected into handlers via get_catalogue
app.state.catalogue = ProductCatalogue(catalogue)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the catalogue domain context and bind request log context."""
    add_context(method=request.method, path=request.url.path)
    try:
        with catalogue.domain_context():
            response = await call_next(request)
    finally:
        clear_context()
    return response


# Added last so it runs first: the locality is resolved before anything else
app.add_middleware(LocaleMiddleware)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(catalogue_router)
app.include_router(localization_router)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(domain=catalogue.name)
