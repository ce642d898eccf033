"""Ibadah service - prayer and Quran reading use cases."""

from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

import structlog

from command_center.application.dto import (
    LogPrayerRequest,
    LogQuranRequest,
    PrayerDayResponse,
    PrayerSlotDTO,
    QuranLogResponse,
    QuranSummaryResponse,
)
from command_center.core.metrics import record_prayer
from command_center.domain.entities import DAILY_PRAYERS, Prayer, PrayerStatus, QuranLog
from command_center.domain.interfaces import IbadahRepository
from command_center.service.accounting import percent_of

logger = structlog.get_logger(__name__)


class IbadahService:
    """
    Application service for daily prayers and Quran reading.

    A day always reports all five prayers; ones not yet logged come back
    with ``logged=False``.
    """

    def __init__(self, ibadah_repository: IbadahRepository):
        self._repo = ibadah_repository

    async def log_prayer(self, request: LogPrayerRequest) -> PrayerSlotDTO:
        completed = request.completed and request.status != PrayerStatus.MISSED

        prayer = Prayer(
            user_id=request.user_id,
            prayer_name=request.prayer_name,
            prayer_date=request.prayer_date,
            completed=completed,
            status=request.status,
            jemaah=request.jemaah if completed else False,
            location=request.location,
            completed_at=datetime.utcnow() if completed else None,
        )
        await self._repo.upsert_prayer(prayer)

        logger.info(
            "prayer_logged",
            user_id=request.user_id,
            prayer=prayer.prayer_name.value,
            prayer_date=prayer.prayer_date.isoformat(),
            status=prayer.status.value,
            jemaah=prayer.jemaah,
        )
        record_prayer(prayer.status.value)

        return PrayerSlotDTO.from_entity(prayer)

    async def get_day(self, user_id: str, prayer_date: Optional[date] = None) -> PrayerDayResponse:
        prayer_date = prayer_date or date.today()
        logged = {p.prayer_name: p for p in await self._repo.list_prayers(user_id, prayer_date)}

        slots = []
        for name in DAILY_PRAYERS:
            prayer = logged.get(name)
            if prayer is None:
                slots.append(PrayerSlotDTO(prayer_name=name.value, logged=False))
            else:
                slots.append(PrayerSlotDTO.from_entity(prayer))

        completed = sum(1 for slot in slots if slot.completed)

        return PrayerDayResponse(
            prayer_date=prayer_date,
            prayers=slots,
            completed_count=completed,
            jemaah_count=sum(1 for slot in slots if slot.jemaah),
            total=len(DAILY_PRAYERS),
            progress_percent=percent_of(completed, len(DAILY_PRAYERS)),
        )

    async def log_quran(self, request: LogQuranRequest) -> QuranLogResponse:
        log = QuranLog(
            user_id=request.user_id,
            log_date=request.log_date,
            pages_read=request.pages_read,
            surah_name=request.surah_name,
            notes=request.notes,
        )
        await self._repo.add_quran_log(log)

        logger.info(
            "quran_logged",
            user_id=request.user_id,
            log_date=log.log_date.isoformat(),
            pages_read=log.pages_read,
        )

        return QuranLogResponse.from_entity(log)

    async def get_quran_summary(
        self,
        user_id: str,
        today: Optional[date] = None,
        days: int = 7,
    ) -> QuranSummaryResponse:
        """Reading totals over the last ``days`` days, today included."""
        end_date = today or date.today()
        start_date = end_date - timedelta(days=max(days, 1) - 1)

        logs = await self._repo.list_quran_logs(user_id, start_date, end_date)

        total_pages = sum(log.pages_read for log in logs)
        span = (end_date - start_date).days + 1
        average = (Decimal(total_pages) / span).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)

        return QuranSummaryResponse(
            start_date=start_date,
            end_date=end_date,
            total_pages=total_pages,
            days_read=len({log.log_date for log in logs if log.pages_read > 0}),
            average_pages_per_day=average,
            today_pages=sum(log.pages_read for log in logs if log.log_date == end_date),
            logs=[QuranLogResponse.from_entity(log) for log in logs],
        )
