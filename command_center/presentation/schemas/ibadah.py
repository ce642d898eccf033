"""Prayer and Quran Pydantic schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from command_center.domain.entities import PrayerLocation, PrayerName, PrayerStatus

from .base import ResponseSchema


class LogPrayerSchema(BaseModel):
    """Schema for PUT /v1/ibadah/prayers; logging twice updates the entry."""

    prayer_name: PrayerName = Field(..., examples=["subuh"])
    prayer_date: Optional[date] = Field(None, description="Defaults to today")
    completed: bool = True
    status: PrayerStatus = PrayerStatus.ON_TIME
    jemaah: bool = Field(False, description="Prayed in congregation")
    location: PrayerLocation = PrayerLocation.HOME


class PrayerSlotSchema(ResponseSchema):
    prayer_name: str
    logged: bool
    completed: bool
    status: Optional[str]
    jemaah: bool
    location: Optional[str]
    completed_at: Optional[datetime]


class PrayerDaySchema(ResponseSchema):
    prayer_date: date
    prayers: List[PrayerSlotSchema]
    completed_count: int = Field(..., ge=0, le=5)
    jemaah_count: int
    total: int
    progress_percent: int


class LogQuranSchema(BaseModel):
    log_date: Optional[date] = Field(None, description="Defaults to today")
    pages_read: int = Field(..., ge=0, le=604, examples=[4])
    surah_name: Optional[str] = Field(None, max_length=100, examples=["Al-Kahf"])
    notes: Optional[str] = None


class QuranLogSchema(ResponseSchema):
    log_id: str
    log_date: date
    pages_read: int
    surah_name: Optional[str]
    notes: Optional[str]


class QuranSummarySchema(ResponseSchema):
    start_date: date
    end_date: date
    total_pages: int
    days_read: int
    average_pages_per_day: Decimal
    today_pages: int
    logs: List[QuranLogSchema]
