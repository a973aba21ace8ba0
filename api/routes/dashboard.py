"""Dashboard summary endpoints for the overview cards."""

from fastapi import APIRouter, Depends

from api.models import DashboardSummary, FilterOptionsOut
from api.store import ItemStore, get_store
from utils.filtering import filter_options
from utils.metrics import calculate_metrics

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/summary", response_model=DashboardSummary, summary="Dashboard summary statistics")
def dashboard_summary(store: ItemStore = Depends(get_store)) -> DashboardSummary:
    """Return the metrics shown on the dashboard cards.

    Always computed over the full catalog; the table filters do not apply.
    Includes:
    - Total confirmed budget (numeric costs not flagged exclude_from_sum)
    - Items awaiting a quote
    - Top 3 event phases by confirmed cost
    """
    items = store.snapshot()
    return DashboardSummary.from_result(calculate_metrics(items), items, store.currency_symbol)


@router.get("/filters", response_model=FilterOptionsOut, summary="Filter dropdown options")
def dashboard_filters(store: ItemStore = Depends(get_store)) -> FilterOptionsOut:
    return FilterOptionsOut(**filter_options(store.snapshot()))
