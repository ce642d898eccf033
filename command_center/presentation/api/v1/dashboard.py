"""Dashboard API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from command_center.application.services import DashboardService
from command_center.core.dependencies import AsOf, CurrentUser, get_dashboard_service
from command_center.presentation.schemas import DashboardSchema, ErrorResponseSchema

dashboard_router = APIRouter(prefix="/dashboard")


@dashboard_router.get(
    "",
    response_model=DashboardSchema,
    summary="Dashboard",
    description="""
    Debt summary, BNPL overview, IOU totals, today's prayers and today's
    spending in one response.
    """,
    responses={
        401: {"model": ErrorResponseSchema, "description": "Missing user identifier"},
    },
)
async def get_dashboard(
    user_id: CurrentUser,
    as_of: AsOf,
    dashboard_service: Annotated[DashboardService, Depends(get_dashboard_service)],
) -> DashboardSchema:
    response = await dashboard_service.get_dashboard(user_id, today=as_of)
    return DashboardSchema.model_validate(response)
