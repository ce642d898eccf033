"""Data transfer objects for prayer and Quran tracking."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from command_center.domain.entities import (
    Prayer,
    PrayerLocation,
    PrayerName,
    PrayerStatus,
    QuranLog,
)


@dataclass(frozen=True)
class LogPrayerRequest:
    user_id: str
    prayer_name: PrayerName
    prayer_date: date
    completed: bool = True
    status: PrayerStatus = PrayerStatus.ON_TIME
    jemaah: bool = False
    location: PrayerLocation = PrayerLocation.HOME


@dataclass(frozen=True)
class PrayerSlotDTO:
    """One of the five daily prayers; ``logged`` is False until recorded."""

    prayer_name: str
    logged: bool
    completed: bool = False
    status: Optional[str] = None
    jemaah: bool = False
    location: Optional[str] = None
    completed_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, prayer: Prayer) -> "PrayerSlotDTO":
        return cls(
            prayer_name=prayer.prayer_name.value,
            logged=True,
            completed=prayer.completed,
            status=prayer.status.value,
            jemaah=prayer.jemaah,
            location=prayer.location.value,
            completed_at=prayer.completed_at,
        )


@dataclass(frozen=True)
class PrayerDayResponse:
    prayer_date: date
    prayers: List[PrayerSlotDTO]
    completed_count: int
    jemaah_count: int
    total: int
    progress_percent: int


@dataclass(frozen=True)
class LogQuranRequest:
    user_id: str
    log_date: date
    pages_read: int
    surah_name: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class QuranLogResponse:
    log_id: str
    log_date: date
    pages_read: int
    surah_name: Optional[str]
    notes: Optional[str]

    @classmethod
    def from_entity(cls, log: QuranLog) -> "QuranLogResponse":
        return cls(
            log_id=str(log.id),
            log_date=log.log_date,
            pages_read=log.pages_read,
            surah_name=log.surah_name,
            notes=log.notes,
        )


@dataclass(frozen=True)
class QuranSummaryResponse:
    start_date: date
    end_date: date
    total_pages: int
    days_read: int
    average_pages_per_day: Decimal
    today_pages: int
    logs: List[QuranLogResponse] = field(default_factory=list)
