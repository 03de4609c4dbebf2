import datetime as dt
from typing import List, Optional
from pydantic import BaseModel, Field

from .. import __version__
from ..core.holiday import Holiday, HolidayType


class HolidayOut(BaseModel):
    key: str
    date: dt.date
    name: str = Field(..., description="Name in the requested locale")
    type: HolidayType
    substitute_of: Optional[str] = None

    @classmethod
    def from_holiday(cls, holiday: Holiday) -> "HolidayOut":
        return cls(
            key=holiday.key,
            date=holiday.date,
            name=holiday.name,
            type=holiday.type,
            substitute_of=holiday.substitute_of,
        )


class JurisdictionInfo(BaseModel):
    code: str
    name: str
    timezone: str
    parent: Optional[str] = None
    regions: List[str] = Field(default_factory=list)


class DayCheck(BaseModel):
    code: str
    date: dt.date
    is_holiday: bool
    is_working_day: bool
    holidays: List[HolidayOut] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str = __version__
    jurisdictions_available: int = 0
