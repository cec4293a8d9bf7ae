"""Admin API routes implementation."""

from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from shortener.errors import BadRequestError
from ..auth import require_admin
from .schemas import (
    RedirectUpsertRequest,
    SuccessResponse,
    HealthResponse,
    ErrorResponse,
)

router = APIRouter(dependencies=[Depends(require_admin)])

_AUTH_ERRORS = {
    401: {"model": ErrorResponse, "description": "Missing or invalid admin credentials"},
    503: {"model": ErrorResponse, "description": "Key-value store unavailable"},
}


async def _read_upsert_body(request: Request) -> RedirectUpsertRequest:
    """Parse the PUT body after authentication has passed."""
    try:
        payload = await request.json()
    except ValueError:
        raise BadRequestError("Request body must be valid JSON", code="MALFORMED_JSON")

    try:
        return RedirectUpsertRequest.model_validate(payload)
    except ValidationError as e:
        raise BadRequestError(
            "Request body must be an object with a 'url' string",
            code="INVALID_BODY",
            details={"errors": [err["msg"] for err in e.errors()]},
        )


@router.get(
    "/redirects",
    response_model=Dict[str, str],
    responses=_AUTH_ERRORS,
    summary="List mappings",
    description="Return every short key and its target URL as one JSON object.",
)
async def list_redirects(request: Request):
    """List all mappings."""
    service = request.app.state.service
    return await service.list_all()


@router.put(
    "/redirects/{key}",
    response_model=SuccessResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed body, invalid URL or reserved key"},
        **_AUTH_ERRORS,
    },
    summary="Create or update mapping",
    description="Point a short key at a URL, overwriting any existing target.",
)
async def put_redirect(request: Request, key: str):
    """Create or overwrite a mapping."""
    service = request.app.state.service
    body = await _read_upsert_body(request)

    await service.upsert(key, body.url)

    return SuccessResponse(success=True)


@router.delete(
    "/redirects/{key}",
    response_model=SuccessResponse,
    responses=_AUTH_ERRORS,
    summary="Delete mapping",
    description="Remove a short key. Removing an unknown key also succeeds.",
)
async def delete_redirect(request: Request, key: str):
    """Delete a mapping."""
    service = request.app.state.service

    await service.remove(key)

    return SuccessResponse(success=True)


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={401: _AUTH_ERRORS[401]},
    summary="Health check",
    description="Check if the key-value store is reachable.",
)
async def health_check(request: Request):
    """Health check endpoint for monitoring."""
    service = request.app.state.service

    health = await service.health_check()

    body = HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        store="healthy" if health["store"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
    if not health["overall"]:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=body.model_dump(mode="json"),
        )
    return body
