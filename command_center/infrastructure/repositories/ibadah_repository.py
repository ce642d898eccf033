"""PostgreSQL implementation of IbadahRepository."""

from datetime import date
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from command_center.domain.entities import (
    DAILY_PRAYERS,
    Prayer,
    PrayerLocation,
    PrayerName,
    PrayerStatus,
    QuranLog,
)
from command_center.domain.interfaces import IbadahRepository
from command_center.infrastructure.database.models import PrayerModel, QuranLogModel


class PostgresIbadahRepository(IbadahRepository):
    """
    PostgreSQL implementation of the prayer and Quran log repository.

    Prayers are unique per (user, date, prayer name); logging the same
    prayer twice updates the existing row in place.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def upsert_prayer(self, prayer: Prayer) -> Prayer:
        stmt = (
            select(PrayerModel)
            .where(PrayerModel.user_id == prayer.user_id)
            .where(PrayerModel.prayer_date == prayer.prayer_date)
            .where(PrayerModel.prayer_name == prayer.prayer_name.value)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            model = PrayerModel(
                id=str(prayer.id),
                user_id=prayer.user_id,
                prayer_name=prayer.prayer_name.value,
                prayer_date=prayer.prayer_date,
                created_at=prayer.created_at,
            )
            self._session.add(model)
        else:
            prayer.id = UUID(str(model.id))
            prayer.created_at = model.created_at

        model.completed = prayer.completed
        model.completed_at = prayer.completed_at
        model.status = prayer.status.value
        model.jemaah = prayer.jemaah
        model.location = prayer.location.value

        await self._session.flush()

        return prayer

    async def list_prayers(self, user_id: str, prayer_date: date) -> List[Prayer]:
        stmt = (
            select(PrayerModel)
            .where(PrayerModel.user_id == user_id)
            .where(PrayerModel.prayer_date == prayer_date)
        )
        result = await self._session.execute(stmt)
        prayers = [self._prayer_to_entity(model) for model in result.scalars().all()]

        return sorted(prayers, key=lambda p: DAILY_PRAYERS.index(p.prayer_name))

    async def add_quran_log(self, log: QuranLog) -> QuranLog:
        model = QuranLogModel(
            id=str(log.id),
            user_id=log.user_id,
            log_date=log.log_date,
            pages_read=log.pages_read,
            surah_name=log.surah_name,
            notes=log.notes,
            created_at=log.created_at,
        )

        self._session.add(model)
        await self._session.flush()

        return log

    async def list_quran_logs(
        self,
        user_id: str,
        start_date: date,
        end_date: date,
    ) -> List[QuranLog]:
        stmt = (
            select(QuranLogModel)
            .where(QuranLogModel.user_id == user_id)
            .where(QuranLogModel.log_date >= start_date)
            .where(QuranLogModel.log_date <= end_date)
            .order_by(QuranLogModel.log_date.desc(), QuranLogModel.created_at.desc())
        )
        result = await self._session.execute(stmt)

        return [
            QuranLog(
                id=UUID(str(model.id)),
                user_id=model.user_id,
                log_date=model.log_date,
                pages_read=model.pages_read,
                surah_name=model.surah_name,
                notes=model.notes,
                created_at=model.created_at,
            )
            for model in result.scalars().all()
        ]

    def _prayer_to_entity(self, model: PrayerModel) -> Prayer:
        return Prayer(
            id=UUID(str(model.id)),
            user_id=model.user_id,
            prayer_name=PrayerName(model.prayer_name),
            prayer_date=model.prayer_date,
            completed=model.completed,
            status=PrayerStatus(model.status),
            jemaah=model.jemaah,
            location=PrayerLocation(model.location),
            completed_at=model.completed_at,
            created_at=model.created_at,
        )
