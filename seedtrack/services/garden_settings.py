from datetime import date
from typing import Optional

from seedtrack.core.config import Settings, settings
from seedtrack.core.exceptions import ParseError
from seedtrack.schemas.garden import GardenSettings, GardenSettingsUpdate
from seedtrack.services.dates import parse_iso


def _month_day(year: int, month_day: str) -> str:
    try:
        month, day = (int(part) for part in month_day.split("-"))
        return date(year, month, day).isoformat()
    except ValueError:
        raise ParseError(month_day, "not a valid MM-DD month/day")


def default_garden_settings(year: Optional[int] = None, config: Settings = settings) -> GardenSettings:
    """Seasonal defaults for ``year`` (current year when omitted)."""
    year = year if year is not None else date.today().year
    return GardenSettings(
        location=config.DEFAULT_LOCATION,
        last_frost_date=_month_day(year, config.DEFAULT_LAST_FROST_MONTH_DAY),
        first_frost_date=_month_day(year, config.DEFAULT_FIRST_FROST_MONTH_DAY),
        use_manual_dates=False,
    )


def update_garden_settings(current: GardenSettings, update: GardenSettingsUpdate) -> GardenSettings:
    changes = update.model_dump(exclude_unset=True, exclude_none=True)
    for field in ("last_frost_date", "first_frost_date"):
        if field in changes:
            parse_iso(changes[field])
    return current.model_copy(update=changes)


def reset_garden_settings(year: Optional[int] = None, config: Settings = settings) -> GardenSettings:
    return default_garden_settings(year, config)
