from typing import Optional

from fastapi import APIRouter, Query

from seedtrack.core.deps import Catalog
from seedtrack.schemas.plant import PlantCategory, PlantTemplate

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=list[PlantTemplate])
async def list_templates(
    catalog: Catalog,
    category: Optional[PlantCategory] = Query(None),
    q: Optional[str] = Query(None, description="Case-insensitive name search"),
):
    templates = catalog.search(q) if q else catalog.all()
    if category is not None:
        templates = [t for t in templates if t.category == category]
    return templates


@router.get("/{template_id}", response_model=PlantTemplate)
async def get_template(template_id: str, catalog: Catalog):
    return catalog.require(template_id)
