"""
GET /api/v1/download endpoint.

Returns the full line item list as CSV text, the same blob the dashboard's
"Copy CSV" button places on the clipboard.  Table filters never apply to
the export.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from api.store import ItemStore, get_store
from utils.export import items_to_csv

router = APIRouter(prefix="/download", tags=["download"])


@router.get("", summary="Download all line items as CSV")
def download(store: ItemStore = Depends(get_store)) -> Response:
    items = store.snapshot()
    return Response(
        content=items_to_csv(items),
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": "attachment; filename=line_items.csv",
            "X-Total-Count": str(len(items)),
        },
    )
