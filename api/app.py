"""
FastAPI application factory for the budget tracker dashboard.

Usage:
    python -m api.app                              # Dev server on port 8000
    APP_ITEMS_PATH=items.json python -m api.app    # Serve a JSON catalog

OpenAPI docs available at http://localhost:8000/docs after starting.

Logging: plain text by default, newline-delimited JSON when
APP_LOG_FORMAT=json.  Every request is logged with a short request id,
which is also returned in the X-Request-ID header.
"""

import json
import logging
import time
import uuid
from pathlib import Path
from typing import Sequence

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from api.routes import dashboard, download
from api.routes import items as items_routes
from api.routes import frontend as frontend_routes
from api.store import ItemStore, build_store
from utils.config import AppConfig
from utils.formatting import format_currency
from utils.line_items import LineItem

# ── Configuration ─────────────────────────────────────────────────────────────
_cfg = AppConfig.from_env()

# ── Structured JSON logging ───────────────────────────────────────────────────


class _JsonFormatter(logging.Formatter):
    """Emit log records as newline-delimited JSON."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Merge extra fields added via logger.info("...", extra={...})
        for key in ("method", "path", "status", "duration_ms", "request_id"):
            if hasattr(record, key):
                data[key] = getattr(record, key)
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)


_logger = logging.getLogger("budget_tracker_api")
_handler = logging.StreamHandler()
if _cfg.log_format == "json":
    _handler.setFormatter(_JsonFormatter())
else:
    _handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )
logging.basicConfig(handlers=[_handler], level=logging.INFO, force=True)


def create_app(
    items: Sequence[LineItem] | None = None,
    items_path: Path | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        items: Serve these line items instead of a catalog (useful for testing).
        items_path: JSON catalog to load; defaults to APP_ITEMS_PATH, then
            the built-in catalog.

    Returns:
        Configured FastAPI application instance.
    """
    if items is not None:
        store = ItemStore(items, currency_symbol=_cfg.currency_symbol)
    else:
        store = build_store(items_path or _cfg.items_path, _cfg.currency_symbol)

    app = FastAPI(
        title="Budget Tracker API",
        summary="Line item budget metrics, filtering and CSV export.",
        description=(
            "## Budget Tracker API\n\n"
            "Serves a procurement line item list with derived dashboard metrics.\n\n"
            "### Key concepts\n"
            "- **Costs** are in Naira. A cost of `\"N/A\"` means the item is "
            "awaiting a quote.\n"
            "- **Summary** and **Budget** rows are high-level estimates flagged "
            "`exclude_from_sum`; they never count toward totals.\n"
            "- **Top cost groupings** rank event phases by confirmed cost, "
            "skipping phases named like summaries or budgets."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {
                "name": "items",
                "description": "List, filter and check off line items.",
            },
            {
                "name": "dashboard",
                "description": "Confirmed budget total, unpriced items, top cost phases.",
            },
            {
                "name": "download",
                "description": "CSV export of the full line item list.",
            },
            {
                "name": "meta",
                "description": "Health check.",
            },
        ],
    )

    # Each app owns its store; routes reach it through request.app.state.
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cfg.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "HEAD", "OPTIONS"],
        allow_headers=["*"],
    )

    # ── Request logging middleware ────────────────────────────────────────────

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log each request with its duration and a short request id."""
        request_id = str(uuid.uuid4())[:8]
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = (time.monotonic() - start) * 1000
        response.headers["X-Request-ID"] = request_id

        if _cfg.log_format == "json":
            _logger.info(
                "request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status": response.status_code,
                    "duration_ms": round(duration_ms, 1),
                    "request_id": request_id,
                },
            )
        else:
            _logger.info(
                "method=%s path=%s status=%d duration_ms=%.1f rid=%s",
                request.method, request.url.path, response.status_code,
                duration_ms, request_id,
            )
        return response

    # ── Security headers ──────────────────────────────────────────────────────

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        """Add Content-Security-Policy, X-Content-Type-Options, and X-Frame-Options."""
        response = await call_next(request)
        # HTMX is served from unpkg; everything else is same-origin.
        response.headers["Content-Security-Policy"] = (
            "default-src 'self'; "
            "script-src 'self' unpkg.com; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src 'self' data:; "
            "connect-src 'self';"
        )
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        return response

    # ── Error handling ────────────────────────────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Catch unhandled exceptions and return JSON instead of HTML traceback."""
        _logger.exception("unhandled error path=%s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc),
                "status_code": 500,
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return JSONResponse(
            status_code=400,
            content={"error": "Bad request", "detail": str(exc), "status_code": 400},
        )

    # ── Health check ──────────────────────────────────────────────────────────

    @app.get("/health", tags=["meta"], summary="Health check")
    def health():
        """Return 200 OK with the number of line items being served."""
        return {"status": "ok", "line_items": len(app.state.store)}

    # ── Register routers ──────────────────────────────────────────────────────

    prefix = "/api/v1"
    app.include_router(items_routes.router, prefix=prefix)
    app.include_router(dashboard.router, prefix=prefix)
    app.include_router(download.router,  prefix=prefix)

    # ── Static files + Jinja2 templates ───────────────────────────────────────
    _here = Path(__file__).parent.parent  # project root

    static_dir = _here / "static"
    templates_dir = _here / "templates"

    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    if templates_dir.exists():
        templates = Jinja2Templates(directory=str(templates_dir))

        def currency(value) -> str:
            """Jinja filter: Naira amount, "N/A", or "Error"."""
            return format_currency(value, _cfg.currency_symbol)

        templates.env.filters["currency"] = currency

        frontend_routes.set_templates(templates)
        app.include_router(frontend_routes.router)

    return app


# Singleton instance for uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.app:app",
        host=_cfg.api_host,
        port=_cfg.api_port,
        log_level="info",
    )
