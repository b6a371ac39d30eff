from fastapi import APIRouter

from seedtrack.core.deps import Today
from seedtrack.schemas.garden import GardenSettings, GardenSettingsApply
from seedtrack.services.garden_settings import (
    default_garden_settings,
    reset_garden_settings,
    update_garden_settings,
)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/defaults", response_model=GardenSettings)
async def get_default_settings(today: Today):
    return default_garden_settings(today.year)


@router.post("/apply", response_model=GardenSettings)
async def apply_settings_update(data: GardenSettingsApply):
    return update_garden_settings(data.current, data.update)


@router.post("/reset", response_model=GardenSettings)
async def reset_settings(today: Today):
    return reset_garden_settings(today.year)
