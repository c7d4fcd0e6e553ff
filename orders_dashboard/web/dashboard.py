"""Server-rendered HTML dashboard: metric cards plus the orders grid."""

import logging
from pathlib import Path
from urllib.parse import urlencode

from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader

from orders_dashboard.core.config import settings
from orders_dashboard.core.deps import DashboardServiceDep, GridQueryDep, TodayDep
from orders_dashboard.models.order import FulfillmentType, OrderStatus
from orders_dashboard.schemas.grid import GridQuery, SortColumn, SortDirection
from orders_dashboard.services.order_grid import NO_RESULTS_MESSAGE, build_grid

logger = logging.getLogger(__name__)

# Jinja2 template environment
TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)), autoescape=True)

STATUS_BADGES = {
    OrderStatus.PLACED: "bg-primary",
    OrderStatus.FULFILLMENT: "bg-warning",
    OrderStatus.COMPLETED: "bg-success",
    OrderStatus.CANCELED: "bg-danger",
}

router = APIRouter()


def grid_url(query: GridQuery) -> str:
    """Dashboard URL that reproduces ``query``; defaults are left out."""
    params: dict[str, str] = {}
    if query.search_text:
        params["search"] = query.search_text
    if query.status_filter is not None:
        params["status"] = query.status_filter.value
    if query.fulfillment_filter is not None:
        params["fulfillment_type"] = query.fulfillment_filter.value
    if query.sort_column != SortColumn.ORDER_NUMBER:
        params["sort_by"] = query.sort_column.value
    if query.sort_direction != SortDirection.ASC:
        params["sort_direction"] = query.sort_direction.value
    return f"/dashboard?{urlencode(params)}" if params else "/dashboard"


@router.get("/dashboard", response_class=HTMLResponse, include_in_schema=False)
async def dashboard_page(
    service: DashboardServiceDep,
    query: GridQueryDep,
    today: TodayDep,
) -> HTMLResponse:
    """Render the dashboard for the current grid state."""
    orders = await service.provider.get_orders()
    metrics = service.summarize(orders, today)
    grid = build_grid(orders, query)
    logger.debug("Rendering dashboard with %d of %d orders", grid.count, grid.total)

    template = _jinja_env.get_template("dashboard.html")
    html_content = template.render(
        title=settings.project_name,
        metrics=metrics,
        grid=grid,
        query=query,
        columns=list(SortColumn),
        sort_links={column: grid_url(query.toggle_sort(column)) for column in SortColumn},
        statuses=list(OrderStatus),
        fulfillment_types=list(FulfillmentType),
        status_badges=STATUS_BADGES,
        no_results_message=NO_RESULTS_MESSAGE,
    )
    return HTMLResponse(content=html_content)
