"""
Plant record operations.

Pure functions over Plant snapshots. Each returns a new Plant and leaves its
input untouched. Storing the result is the caller's job.

The event log is the source of truth; the six stage date fields are its
projection, kept on the record for fast lookup. record_event is the only
writer and enforces the fill order: a stage can only be recorded once the
stage before it has a date.
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional

from pydantic.alias_generators import to_camel

from seedtrack.core.exceptions import StageOrderError
from seedtrack.schemas.plant import EventType, Plant, PlantEvent, PlantTemplate, Stage
from seedtrack.services.dates import parse_iso
from seedtrack.services.stages import (
    EVENT_STAGES,
    STAGE_FIELDS,
    STAGE_ORDER,
    is_stage_complete,
    next_stage,
    previous_stage,
)

logger = logging.getLogger(__name__)


def new_id() -> str:
    return uuid.uuid4().hex


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def create_plant(
    template: PlantTemplate,
    sow_date: str,
    *,
    name: Optional[str] = None,
    plant_id: Optional[str] = None,
    now: Optional[str] = None,
) -> Plant:
    """
    New plant sown indoors on ``sow_date``.

    Offsets are copied by value from the template. The log starts with the
    sow event.
    """
    parse_iso(sow_date)
    now = now or _now_iso()
    display_name = (name or "").strip() or template.name

    plant = Plant(
        id=plant_id or new_id(),
        template_id=template.id,
        name=display_name,
        category=template.category,
        sowed_indoors=sow_date,
        days_to_germination=template.days_to_germination,
        days_to_transplant=template.days_to_transplant,
        days_to_harden_off=template.days_to_harden_off,
        days_to_plant_out=template.days_to_plant_out,
        days_to_harvest=template.days_to_harvest,
        events=[
            PlantEvent(
                id=new_id(),
                date=sow_date,
                type=EventType.sowed,
                note=f"Sowed {display_name} indoors",
            )
        ],
        created_at=now,
        updated_at=now,
    )
    logger.info("create_plant: %s from template %s", plant.id, template.id)
    return plant


def record_event(
    plant: Plant,
    event_type: EventType | str,
    *,
    note: Optional[str] = None,
    at: Optional[str] = None,
    event_id: Optional[str] = None,
    now: Optional[str] = None,
) -> Plant:
    """
    Append an event and update the matching stage date.

    ``at`` is the event timestamp (defaults to now). Raises StageOrderError
    when the previous stage has no date yet, or when the next stage already
    has one. Re-recording the latest stage overwrites its date. A harvest only sets
    first_harvest_date the first time; later harvests just extend the log.
    """
    event_type = EventType(event_type)
    now = now or _now_iso()
    if at is not None:
        parse_iso(at)
    timestamp = at or now

    updates: dict = {}
    stage = EVENT_STAGES[event_type]
    if stage is not None:
        prior = previous_stage(stage)
        if prior is not None and not is_stage_complete(plant, prior):
            raise StageOrderError(
                f"cannot record {event_type.value!r} on plant {plant.id}: "
                f"{to_camel(STAGE_FIELDS[prior])} is not set"
            )
        following = next_stage(stage)
        if following is not None and is_stage_complete(plant, following):
            raise StageOrderError(
                f"cannot record {event_type.value!r} on plant {plant.id}: "
                f"{to_camel(STAGE_FIELDS[following])} is already set"
            )
        field = STAGE_FIELDS[stage]
        if stage is not Stage.harvested or not plant.first_harvest_date:
            updates[field] = timestamp

    event = PlantEvent(id=event_id or new_id(), date=timestamp, type=event_type, note=note)
    updates["events"] = [*plant.events, event]
    updates["updated_at"] = now

    logger.info("record_event: %s on plant %s", event_type.value, plant.id)
    return plant.model_copy(update=updates)


def project_stage_dates(events: Iterable[PlantEvent]) -> dict[str, Optional[str]]:
    """Rebuild the six stage date fields from an event log, in log order."""
    projected: dict[str, Optional[str]] = {field: None for field in STAGE_FIELDS.values()}
    for event in events:
        stage = EVENT_STAGES[event.type]
        if stage is None:
            continue
        field = STAGE_FIELDS[stage]
        if stage is Stage.harvested and projected[field] is not None:
            continue
        projected[field] = event.date
    return projected


def validate_stage_order(plant: Plant) -> list[str]:
    """
    Diagnostics for a snapshot; empty when consistent. Never raises.

    Flags later stage dates recorded while an earlier one is missing, and
    stage dates that disagree with the event log.
    """
    issues: list[str] = []

    missing: list[str] = []
    for stage in STAGE_ORDER:
        field = STAGE_FIELDS[stage]
        if is_stage_complete(plant, stage):
            if missing:
                issues.append(
                    f"{to_camel(field)} is set while {', '.join(missing)} "
                    f"{'is' if len(missing) == 1 else 'are'} missing"
                )
        else:
            missing.append(to_camel(field))

    if plant.events:
        projected = project_stage_dates(plant.events)
        for field, value in projected.items():
            if getattr(plant, field) != value:
                issues.append(f"{to_camel(field)} does not match the event log")

    return issues


def rename_plant(plant: Plant, name: str, *, now: Optional[str] = None) -> Plant:
    name = name.strip()
    if not name:
        raise ValueError("Plant name cannot be blank")
    return plant.model_copy(update={"name": name, "updated_at": now or _now_iso()})
