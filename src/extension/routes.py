"""FastAPI routes for the extension endpoint."""

from fastapi import APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from extension.dispatch import dispatch
from extension.schemas import ExtensionErrorResponse, ExtensionInput, ExtensionResponse
from shared.exceptions import ExtensionError

router = APIRouter(tags=["extension"])


@router.post(
    "/",
    response_model=ExtensionResponse,
    responses={400: {"model": ExtensionErrorResponse}, 500: {"model": ExtensionErrorResponse}},
)
def handle_extension(body: ExtensionInput) -> ExtensionResponse:
    """Answer a commercetools extension call with update actions.

    Declared sync so gateway calls run in the threadpool.
    """
    return ExtensionResponse(actions=dispatch(body))


async def extension_error_handler(request: Request, exc: ExtensionError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer a malformed extension body in the commercetools error shape."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'] if part != 'body')}: {error['msg']}" for error in exc.errors()
    )
    return await extension_error_handler(request, ExtensionError(400, f"Invalid extension input - {details}"))
