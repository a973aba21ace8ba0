"""
Frontend HTML routes.

Serves the Jinja2 templates for the dashboard page and its HTMX partials.

Routes:
    GET  /                          → index.html (cards, lists, filters, table)
    GET  /partials/table            → partials/table.html (filter swap target)
    POST /partials/toggle/{item_id} → partials/table.html after toggling done
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from api.store import ItemStore, get_store
from utils.filtering import ALL, FilterState, filter_items, filter_options
from utils.metrics import calculate_metrics

router = APIRouter(tags=["frontend"])

# Templates instance is set by create_app() after mounting.
_templates: Jinja2Templates | None = None


def set_templates(t: Jinja2Templates) -> None:
    global _templates
    _templates = t


def _tmpl() -> Jinja2Templates:
    if _templates is None:
        raise RuntimeError("Templates not initialised — call set_templates() first")
    return _templates


def _parse_filters(request: Request) -> FilterState:
    params = request.query_params
    return FilterState(type=params.get("type") or ALL, cost=params.get("cost") or ALL)


def _table_context(store: ItemStore, filters: FilterState) -> dict:
    items = store.snapshot()
    return {
        "filters": filters,
        "items": filter_items(items, filters),
        "total": len(items),
    }


# ── Routes ────────────────────────────────────────────────────────────────────

@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index(request: Request, store: ItemStore = Depends(get_store)) -> HTMLResponse:
    """Dashboard page."""
    filters = _parse_filters(request)
    items = store.snapshot()
    return _tmpl().TemplateResponse(
        request,
        "index.html",
        {
            "metrics": calculate_metrics(items),
            "options": filter_options(items),
            **_table_context(store, filters),
        },
    )


@router.get("/partials/table", response_class=HTMLResponse, include_in_schema=False)
def table_partial(request: Request, store: ItemStore = Depends(get_store)) -> HTMLResponse:
    """HTMX partial: the filtered line item table."""
    return _tmpl().TemplateResponse(
        request,
        "partials/table.html",
        _table_context(store, _parse_filters(request)),
    )


@router.post("/partials/toggle/{item_id}", response_class=HTMLResponse, include_in_schema=False)
def toggle_partial(
    item_id: str,
    request: Request,
    store: ItemStore = Depends(get_store),
) -> HTMLResponse:
    """HTMX partial: flip one checkbox, then re-render the table."""
    try:
        store.toggle_done(item_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Line item {item_id} not found")
    return _tmpl().TemplateResponse(
        request,
        "partials/table.html",
        _table_context(store, _parse_filters(request)),
    )
