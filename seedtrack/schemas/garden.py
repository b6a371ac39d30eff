from typing import Optional

from seedtrack.schemas.base import CamelModel


class GardenSettings(CamelModel):
    location: str
    last_frost_date: str     # ISO date
    first_frost_date: str    # ISO date
    use_manual_dates: bool = False


class GardenSettingsUpdate(CamelModel):
    location: Optional[str] = None
    last_frost_date: Optional[str] = None
    first_frost_date: Optional[str] = None
    use_manual_dates: Optional[bool] = None


class GardenSettingsApply(CamelModel):
    current: GardenSettings
    update: GardenSettingsUpdate
