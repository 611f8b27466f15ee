import logging
from typing import Optional, Tuple

import httpx
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse

from app.models.audit_request import AuditRequest
from app.models.report import Report
from app.services.fetcher import fetch_url
from app.services.renderer import render_page
from app.services.report import analyze_html

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="Audit page",
    description=(
        "Shows the URL form.  When `url` is given the page is fetched and the "
        "SEO audit table, preview cards and additional OG/Twitter meta tags "
        "are rendered below the form."
    ),
)
async def audit_page(
    url: Optional[str] = Query(default=None, description="Page to fetch and audit."),
) -> HTMLResponse:
    if not url:
        return HTMLResponse(render_page())

    logger.info("Audit page request received", extra={"url": url})
    try:
        html = await fetch_url(url)
    except (ValueError, httpx.HTTPError, RuntimeError) as exc:
        _, detail = _describe_fetch_error(url, exc)
        return HTMLResponse(render_page(url=url, error=detail))

    report = analyze_html(html, url)
    return HTMLResponse(render_page(url=url, report=report))


@router.post("/audit", response_model=Report, summary="Audit a page and return JSON")
async def audit(body: AuditRequest) -> Report:
    """Fetch *url* and return the extracted fields with their nine audit results."""
    url = str(body.url)
    logger.info("Audit request received", extra={"url": url})

    try:
        html = await fetch_url(url)
    except (ValueError, httpx.HTTPError, RuntimeError) as exc:
        status_code, detail = _describe_fetch_error(url, exc)
        raise HTTPException(status_code=status_code, detail=detail)

    return analyze_html(html, url)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _describe_fetch_error(url: str, exc: Exception) -> Tuple[int, str]:
    """Log a fetch failure and map it to an HTTP status and a readable message."""
    if isinstance(exc, ValueError):
        logger.warning("Invalid or blocked URL: %s – %s", url, exc)
        return 400, str(exc)
    if isinstance(exc, httpx.TimeoutException):
        logger.error("Timeout fetching URL: %s", url)
        return 504, "The target URL timed out."
    if isinstance(exc, httpx.HTTPStatusError):
        logger.error("HTTP error fetching URL %s: %s", url, exc)
        return 502, f"Target URL returned HTTP {exc.response.status_code}."
    logger.error("Error fetching URL %s: %s", url, exc)
    return 502, str(exc)
