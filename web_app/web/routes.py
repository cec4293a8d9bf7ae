"""Web routes: public redirects and the admin page."""

import os
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from shortener.errors import NotFoundError, StoreUnavailableError
from shortener.models import ROOT_KEY, Found, NotFound
from ..auth import require_admin
from ..html_prefix import inject_forwarded_prefix_into_html

router = APIRouter()

template_dir = os.path.join(os.path.dirname(__file__), "..", "..", "ux", "web")


def _redirect_response(outcome, key: str):
    """Build the HTTP response for a resolved key."""
    if isinstance(outcome, Found):
        headers = {"Cache-Control": "no-cache"} if outcome.status == status.HTTP_302_FOUND else None
        return RedirectResponse(url=outcome.target, status_code=outcome.status, headers=headers)

    if isinstance(outcome, NotFound):
        raise NotFoundError(key)

    raise StoreUnavailableError("get", outcome.reason)


@router.get(
    "/admin/",
    response_class=HTMLResponse,
    include_in_schema=False,
    dependencies=[Depends(require_admin)],
)
async def admin_page(request: Request):
    """Serve the admin page. Rewrites API paths only when X-Forwarded-Prefix is set."""
    html_file = os.path.join(template_dir, "admin.html")
    prefix = getattr(request.state, "forwarded_prefix", "")

    with open(html_file, "r", encoding="utf-8") as f:
        content = f.read()

    return HTMLResponse(content=inject_forwarded_prefix_into_html(content, prefix))


@router.get("/", include_in_schema=False)
async def root_redirect(request: Request):
    """Permanent redirect to the configured operator URL."""
    resolver = request.app.state.resolver
    outcome = await resolver.resolve(ROOT_KEY)
    return _redirect_response(outcome, ROOT_KEY)


@router.get("/{key}", include_in_schema=False)
async def redirect_to_url(request: Request, key: str):
    """Redirect a short key to its target URL."""
    resolver = request.app.state.resolver
    outcome = await resolver.resolve(key)
    return _redirect_response(outcome, key)
