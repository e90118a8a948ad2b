"""Braintree extension FastAPI application.

commercetools calls the extension on payment and customer create/update;
the response carries the update actions to apply.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8080
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from extension.routes import extension_error_handler, validation_error_handler
from extension.routes import router as extension_router
from gateway import get_gateway
from shared.config import get_settings
from shared.exceptions import ExtensionError
from shared.logging import configure_logging

configure_logging(get_settings())

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Braintree Extension",
    description="commercetools API extension for Braintree payments and customers",
)

app.add_exception_handler(ExtensionError, extension_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(extension_router)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    settings = get_settings()
    return JSONResponse(
        content={
            "status": "ok",
            "environment": settings.environment,
            "gateway": type(get_gateway()).__name__,
        }
    )
