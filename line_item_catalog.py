"""
Built-in line item catalog for the product launch budget.

This is the dashboard's default data set.  Costs are in Naira.  Rows with
cost type "Summary" or "Budget" are high-level estimates and carry
``exclude_from_sum`` so they never double-count against the detail rows.

Set APP_ITEMS_PATH (or pass --items to budget_report.py) to load a JSON
list with the same keys instead.
"""

from utils.line_items import LineItem, load_line_items

LINE_ITEM_RECORDS: list[dict] = [
    # ── Budget envelope ───────────────────────────────────────────────────────
    {"id": "B-01", "description": "Approved launch budget envelope",
     "event": "Budget Summary", "type": "Budget", "cost": 25_000_000,
     "cost_type": "Budget", "status": "Priced", "exclude_from_sum": True},
    {"id": "B-02", "description": "Contingency reserve (10% of envelope)",
     "event": "Budget Summary", "type": "Budget", "cost": 2_500_000,
     "cost_type": "Budget", "status": "Priced", "exclude_from_sum": True},

    # ── Phase 1: Planning & Design ────────────────────────────────────────────
    {"id": "P1-01", "description": "Event concept and creative direction",
     "event": "Phase 1: Planning & Design", "type": "Service", "cost": 1_200_000,
     "cost_type": "Revenue", "status": "Priced"},
    {"id": "P1-02", "description": "Stage and booth 3D renders",
     "event": "Phase 1: Planning & Design", "type": "Service", "cost": 450_000,
     "cost_type": "Revenue", "status": "Priced"},
    {"id": "P1-03", "description": "Venue site survey and permits (Lagos State)",
     "event": "Phase 1: Planning & Design", "type": "Logistics", "cost": "N/A",
     "cost_type": "Revenue", "status": "Unpriced"},
    {"id": "P1-S", "description": "Planning & Design estimate",
     "event": "Phase 1: Planning & Design", "type": "Service", "cost": 2_000_000,
     "cost_type": "Summary", "status": "Priced", "exclude_from_sum": True},

    # ── Phase 2: Venue & Setup ────────────────────────────────────────────────
    {"id": "P2-01", "description": "Hall rental, Eko Convention Centre (2 days)",
     "event": "Phase 2: Venue & Setup", "type": "Venue", "cost": 6_500_000,
     "cost_type": "Revenue", "status": "Priced"},
    {"id": "P2-02", "description": "LED video wall, 6m x 3m",
     "event": "Phase 2: Venue & Setup", "type": "Equipment", "cost": 3_800_000,
     "cost_type": "CAPEX", "status": "Priced"},
    {"id": "P2-03", "description": "Sound system & 2 wireless \"lapel\" mics",
     "event": "Phase 2: Venue & Setup", "type": "Equipment", "cost": 1_750_000,
     "cost_type": "CAPEX", "status": "Priced"},
    {"id": "P2-04", "description": "Backup diesel generator (500 kVA) hire",
     "event": "Phase 2: Venue & Setup", "type": "Equipment", "cost": "N/A",
     "cost_type": "Revenue", "status": "Unpriced"},
    {"id": "P2-05", "description": "Branded backdrop and pull-up banners",
     "event": "Phase 2: Venue & Setup", "type": "Marketing", "cost": 620_000,
     "cost_type": "Revenue", "status": "Priced"},

    # ── Phase 3: Launch Day ───────────────────────────────────────────────────
    {"id": "P3-01", "description": "Catering for 400 guests",
     "event": "Phase 3: Launch Day", "type": "Catering", "cost": 4_800_000,
     "cost_type": "Revenue", "status": "Priced"},
    {"id": "P3-02", "description": "MC and live band",
     "event": "Phase 3: Launch Day", "type": "Service", "cost": 2_250_000,
     "cost_type": "Revenue", "status": "Priced"},
    {"id": "P3-03", "description": "Event security and crowd control",
     "event": "Phase 3: Launch Day", "type": "Logistics", "cost": "N/A",
     "cost_type": "Revenue", "status": "Unpriced"},
    {"id": "P3-04", "description": "Photography & videography crew",
     "event": "Phase 3: Launch Day", "type": "Service", "cost": 900_000,
     "cost_type": "Revenue", "status": "Priced"},
    {"id": "P3-05", "description": "Guest shuttle buses (Ikeja - Victoria Island)",
     "event": "Phase 3: Launch Day", "type": "Logistics", "cost": 780_000,
     "cost_type": "Revenue", "status": "Priced"},

    # ── Phase 4: Post-Event ───────────────────────────────────────────────────
    {"id": "P4-01", "description": "Teardown and waste removal",
     "event": "Phase 4: Post-Event", "type": "Logistics", "cost": 350_000,
     "cost_type": "Revenue", "status": "Priced"},
    {"id": "P4-02", "description": "Highlight video edit",
     "event": "Phase 4: Post-Event", "type": "Marketing", "cost": "N/A",
     "cost_type": "Revenue", "status": "Unpriced"},
    {"id": "P4-03", "description": "Demo units retained as showroom stock",
     "event": "Phase 4: Post-Event", "type": "Equipment", "cost": 1_150_000,
     "cost_type": "CAPEX", "status": "Priced"},
]


def default_line_items() -> tuple[LineItem, ...]:
    """Return the built-in catalog as LineItem records."""
    return load_line_items(LINE_ITEM_RECORDS)
