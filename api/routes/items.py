"""
Line item endpoints.

GET  /api/v1/items                       filtered table rows
GET  /api/v1/items/{item_id}             one item
POST /api/v1/items/{item_id}/toggle-done flip the done checkbox
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from api.models import LineItemListResponse, LineItemOut
from api.store import ItemStore, get_store
from utils.filtering import ALL, FilterState, filter_items

router = APIRouter(prefix="/items", tags=["items"])

_NOT_FOUND = {
    404: {
        "description": "No line item has this id",
        "content": {"application/json": {"example": {"detail": "Line item P9-99 not found"}}},
    },
}


@router.get("", response_model=LineItemListResponse, summary="List line items")
def list_items(
    type: str = Query(ALL, description="Item type filter, or 'All'"),
    cost: str = Query(ALL, description="Cost status filter (Priced/Unpriced), or 'All'"),
    store: ItemStore = Depends(get_store),
) -> LineItemListResponse:
    """Return the items visible under the given filters, in catalog order.

    Summary and Budget rows are only included while both filters are 'All'.
    """
    items = store.snapshot()
    filters = FilterState(type=type, cost=cost)
    visible = filter_items(items, filters)
    return LineItemListResponse(
        type=filters.type,
        cost=filters.cost,
        total=len(items),
        visible=len(visible),
        items=[LineItemOut.from_item(i, store.currency_symbol) for i in visible],
    )


@router.get(
    "/{item_id}",
    response_model=LineItemOut,
    summary="Get one line item",
    responses=_NOT_FOUND,
)
def get_item(item_id: str, store: ItemStore = Depends(get_store)) -> LineItemOut:
    try:
        item = store.get(item_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Line item {item_id} not found")
    return LineItemOut.from_item(item, store.currency_symbol)


@router.post(
    "/{item_id}/toggle-done",
    response_model=LineItemOut,
    summary="Toggle an item's done flag",
    responses=_NOT_FOUND,
)
def toggle_item_done(item_id: str, store: ItemStore = Depends(get_store)) -> LineItemOut:
    """Flip ``done`` on one item; every other item is left untouched."""
    try:
        item = store.toggle_done(item_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Line item {item_id} not found")
    return LineItemOut.from_item(item, store.currency_symbol)
