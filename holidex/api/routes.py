from fastapi import APIRouter, Query
from typing import List, Optional
from datetime import date

from .models import DayCheck, HealthResponse, HolidayOut, JurisdictionInfo
from ..core.holiday import HolidayType
from ..core.registry import JurisdictionRegistry

router = APIRouter()


@router.get("/", response_model=HealthResponse)
async def health_check():
    return HealthResponse(jurisdictions_available=len(JurisdictionRegistry.list_jurisdictions()))


@router.get("/jurisdictions", response_model=List[JurisdictionInfo])
async def list_jurisdictions():
    jurisdictions_info = []

    for code in JurisdictionRegistry.list_jurisdictions():
        jurisdiction = JurisdictionRegistry.get_jurisdiction(code)
        if jurisdiction:
            jurisdictions_info.append(JurisdictionInfo(
                code=jurisdiction.code,
                name=jurisdiction.name,
                timezone=jurisdiction.timezone,
                parent=jurisdiction.parent,
                regions=JurisdictionRegistry.regions_of(code),
            ))

    return jurisdictions_info


@router.get("/holidays/{code}/check/{day}", response_model=DayCheck)
async def check_day(code: str, day: date, locale: Optional[str] = None):
    registry = JurisdictionRegistry.create(code, day.year, locale)
    return DayCheck(
        code=registry.code,
        date=day,
        is_holiday=registry.is_holiday(day),
        is_working_day=registry.is_working_day(day),
        holidays=[HolidayOut.from_holiday(h) for h in registry.on(day)],
    )


@router.get("/holidays/{code}/{year}/between", response_model=List[HolidayOut])
async def holidays_between(code: str, year: int, start: date, end: date, inclusive: bool = True, locale: Optional[str] = None):
    registry = JurisdictionRegistry.create(code, year, locale)
    return [HolidayOut.from_holiday(h) for h in registry.between(start, end, inclusive)]


@router.get("/holidays/{code}/{year}/{key}/next", response_model=HolidayOut)
async def next_occurrence(code: str, year: int, key: str, locale: Optional[str] = None):
    registry = JurisdictionRegistry.create(code, year, locale)
    return HolidayOut.from_holiday(registry.next(key))


@router.get("/holidays/{code}/{year}/{key}/previous", response_model=HolidayOut)
async def previous_occurrence(code: str, year: int, key: str, locale: Optional[str] = None):
    registry = JurisdictionRegistry.create(code, year, locale)
    return HolidayOut.from_holiday(registry.previous(key))


@router.get("/holidays/{code}/{year}/{key}", response_model=HolidayOut)
async def get_holiday(code: str, year: int, key: str, locale: Optional[str] = None):
    registry = JurisdictionRegistry.create(code, year, locale)
    return HolidayOut.from_holiday(registry.get(key))


@router.get("/holidays/{code}/{year}", response_model=List[HolidayOut])
async def list_holidays(
    code: str,
    year: int,
    locale: Optional[str] = None,
    type: Optional[List[HolidayType]] = Query(default=None),
):
    registry = JurisdictionRegistry.create(code, year, locale)
    holidays = registry.filter(*type) if type else registry.holidays()
    return [HolidayOut.from_holiday(h) for h in holidays]
