"""FastAPI application - itinerary, expense and generation endpoints."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from tripmate.app.api.routes.expenses import router as expenses_router
from tripmate.app.api.routes.generation import router as generation_router
from tripmate.app.api.routes.health import router as health_router
from tripmate.app.api.routes.itinerary import router as itinerary_router
from tripmate.app.api.routes.metrics import router as metrics_router
from tripmate.app.errors import NotFoundError, TripmateError, ValidationError

app = FastAPI(title="Tripmate API", version="0.1.0")

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(itinerary_router, tags=["itinerary"])
app.include_router(expenses_router, tags=["expenses"])
app.include_router(generation_router)


def _error_body(exc: TripmateError) -> dict[str, str]:
    return {"code": exc.code.value, "detail": exc.message, "message": exc.user_message}


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=422, content=_error_body(exc))


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=_error_body(exc))


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Tripmate API", "version": "0.1.0"}
