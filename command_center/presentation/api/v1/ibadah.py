"""Prayer and Quran tracking API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from command_center.application.dto import LogPrayerRequest, LogQuranRequest
from command_center.application.services import IbadahService
from command_center.core.dependencies import AsOf, CurrentUser, get_ibadah_service
from command_center.presentation.schemas import (
    ErrorResponseSchema,
    LogPrayerSchema,
    LogQuranSchema,
    PrayerDaySchema,
    PrayerSlotSchema,
    QuranLogSchema,
    QuranSummarySchema,
)

ibadah_router = APIRouter(
    prefix="/ibadah",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Missing user identifier"},
    },
)

Service = Annotated[IbadahService, Depends(get_ibadah_service)]


@ibadah_router.put(
    "/prayers",
    response_model=PrayerSlotSchema,
    summary="Log Prayer",
    description="Record one of the five daily prayers; logging it again replaces the entry.",
)
async def log_prayer(
    request: LogPrayerSchema,
    user_id: CurrentUser,
    as_of: AsOf,
    ibadah_service: Service,
) -> PrayerSlotSchema:
    dto = LogPrayerRequest(
        user_id=user_id,
        prayer_name=request.prayer_name,
        prayer_date=request.prayer_date or as_of,
        completed=request.completed,
        status=request.status,
        jemaah=request.jemaah,
        location=request.location,
    )
    response = await ibadah_service.log_prayer(dto)
    return PrayerSlotSchema.model_validate(response)


@ibadah_router.get("/prayers/today", response_model=PrayerDaySchema, summary="Today's Prayers")
async def get_today(user_id: CurrentUser, as_of: AsOf, ibadah_service: Service) -> PrayerDaySchema:
    response = await ibadah_service.get_day(user_id, as_of)
    return PrayerDaySchema.model_validate(response)


@ibadah_router.post("/quran", response_model=QuranLogSchema, status_code=201, summary="Log Quran Reading")
async def log_quran(
    request: LogQuranSchema,
    user_id: CurrentUser,
    as_of: AsOf,
    ibadah_service: Service,
) -> QuranLogSchema:
    dto = LogQuranRequest(
        user_id=user_id,
        log_date=request.log_date or as_of,
        pages_read=request.pages_read,
        surah_name=request.surah_name,
        notes=request.notes,
    )
    response = await ibadah_service.log_quran(dto)
    return QuranLogSchema.model_validate(response)


@ibadah_router.get("/quran/summary", response_model=QuranSummarySchema, summary="Quran Reading Summary")
async def get_quran_summary(
    user_id: CurrentUser,
    as_of: AsOf,
    ibadah_service: Service,
    days: Annotated[int, Query(ge=1, le=366, description="Number of days to cover")] = 7,
) -> QuranSummarySchema:
    response = await ibadah_service.get_quran_summary(user_id, today=as_of, days=days)
    return QuranSummarySchema.model_validate(response)
