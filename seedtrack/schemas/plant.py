from enum import Enum
from typing import Optional

from pydantic import Field

from seedtrack.schemas.base import CamelModel


class PlantCategory(str, Enum):
    veg = "veg"
    herb = "herb"
    fruit = "fruit"


class Stage(str, Enum):
    not_started = "not-started"
    sowed = "sowed"
    germinated = "germinated"
    transplanted = "transplanted"
    hardened_off = "hardened-off"
    planted_out = "planted-out"
    harvested = "harvested"


class EventType(str, Enum):
    sowed = "sowed"
    germinated = "germinated"
    transplanted = "transplanted"
    hardened = "hardened"
    planted_out = "planted-out"
    harvested = "harvested"
    note = "note"


class PlantTemplate(CamelModel):
    id: str
    name: str
    category: PlantCategory
    days_to_germination: int = Field(ge=0)
    days_to_transplant: int = Field(ge=0)    # after germination
    days_to_harden_off: int = Field(ge=0)    # before planting out
    days_to_plant_out: int                   # relative to last frost, negative = before
    days_to_harvest: int = Field(ge=0)       # after planting out
    sow_indoors_weeks_before: Optional[int] = Field(None, ge=0)
    direct_sow_weeks_after: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None

    model_config = {**CamelModel.model_config, "frozen": True}


class PlantEvent(CamelModel):
    id: str
    date: str
    type: EventType
    note: Optional[str] = None


class Plant(CamelModel):
    id: str
    template_id: str
    name: str
    category: PlantCategory

    # Stage dates (ISO strings), filled left to right
    sowed_indoors: Optional[str] = None
    germinated_date: Optional[str] = None
    transplanted_date: Optional[str] = None
    hardened_off_date: Optional[str] = None
    planted_out_date: Optional[str] = None
    first_harvest_date: Optional[str] = None

    # Copied from the template when the plant is created
    days_to_germination: int
    days_to_transplant: int
    days_to_harden_off: int
    days_to_plant_out: int
    days_to_harvest: int

    events: list[PlantEvent] = []

    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class PlantCreate(CamelModel):
    template_id: str
    sow_date: str
    name: Optional[str] = None


class PlantEventCreate(CamelModel):
    plant: Plant
    type: EventType
    note: Optional[str] = None
    date: Optional[str] = None


class PlantRename(CamelModel):
    plant: Plant
    name: str


class PlantStageRead(CamelModel):
    plant_id: str
    stage: Stage
    label: str
    emoji: str
    issues: list[str] = []
