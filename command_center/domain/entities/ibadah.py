"""Spiritual practice entities: daily prayers and Quran reading."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4


class PrayerName(str, Enum):
    SUBUH = "subuh"
    ZOHOR = "zohor"
    ASAR = "asar"
    MAGHRIB = "maghrib"
    ISYAK = "isyak"


# Order in which the five daily prayers fall
DAILY_PRAYERS = [
    PrayerName.SUBUH,
    PrayerName.ZOHOR,
    PrayerName.ASAR,
    PrayerName.MAGHRIB,
    PrayerName.ISYAK,
]


class PrayerStatus(str, Enum):
    ON_TIME = "on_time"
    LATE = "late"
    MISSED = "missed"


class PrayerLocation(str, Enum):
    HOME = "home"
    OFFICE = "office"
    MASJID_MUADZ = "masjid_muadz"
    OTHER = "other"


@dataclass
class Prayer:
    """One of the five daily prayers on a given date."""

    user_id: str
    prayer_name: PrayerName
    prayer_date: date
    completed: bool = False
    status: PrayerStatus = PrayerStatus.ON_TIME
    jemaah: bool = False
    location: PrayerLocation = PrayerLocation.HOME
    completed_at: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class QuranLog:
    user_id: str
    log_date: date
    pages_read: int
    surah_name: Optional[str] = None
    notes: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
