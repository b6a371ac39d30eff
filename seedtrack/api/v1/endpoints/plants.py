from fastapi import APIRouter, HTTPException, status

from seedtrack.core.deps import Catalog
from seedtrack.schemas.plant import (
    Plant,
    PlantCreate,
    PlantEventCreate,
    PlantRename,
    PlantStageRead,
)
from seedtrack.services.plants import create_plant, record_event, rename_plant, validate_stage_order
from seedtrack.services.stages import current_stage, stage_display

router = APIRouter(prefix="/plants", tags=["plants"])


@router.post("", response_model=Plant, status_code=status.HTTP_201_CREATED)
async def create_plant_from_template(data: PlantCreate, catalog: Catalog):
    template = catalog.require(data.template_id)
    return create_plant(template, data.sow_date, name=data.name)


@router.post("/events", response_model=Plant)
async def record_plant_event(data: PlantEventCreate):
    return record_event(data.plant, data.type, note=data.note, at=data.date)


@router.post("/rename", response_model=Plant)
async def rename(data: PlantRename):
    try:
        return rename_plant(data.plant, data.name)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.post("/stage", response_model=PlantStageRead)
async def get_plant_stage(plant: Plant):
    stage = current_stage(plant)
    label, emoji = stage_display(stage)
    return PlantStageRead(
        plant_id=plant.id,
        stage=stage,
        label=label,
        emoji=emoji,
        issues=validate_stage_order(plant),
    )
