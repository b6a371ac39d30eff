"""
Growth stage model.

Six stages in a fixed order, each backed by one date field on the plant.
The current stage is the furthest stage with a date recorded, not a count
of recorded stages, so a snapshot with gaps still resolves to a stage.
"""
from typing import Optional

from seedtrack.schemas.plant import EventType, Plant, Stage

STAGE_ORDER: list[Stage] = [
    Stage.sowed,
    Stage.germinated,
    Stage.transplanted,
    Stage.hardened_off,
    Stage.planted_out,
    Stage.harvested,
]

STAGE_FIELDS: dict[Stage, str] = {
    Stage.sowed: "sowed_indoors",
    Stage.germinated: "germinated_date",
    Stage.transplanted: "transplanted_date",
    Stage.hardened_off: "hardened_off_date",
    Stage.planted_out: "planted_out_date",
    Stage.harvested: "first_harvest_date",
}

EVENT_STAGES: dict[EventType, Optional[Stage]] = {
    EventType.sowed: Stage.sowed,
    EventType.germinated: Stage.germinated,
    EventType.transplanted: Stage.transplanted,
    EventType.hardened: Stage.hardened_off,
    EventType.planted_out: Stage.planted_out,
    EventType.harvested: Stage.harvested,
    EventType.note: None,
}

STAGE_DISPLAY: dict[Stage, tuple[str, str]] = {
    Stage.not_started: ("Not started", "📦"),
    Stage.sowed: ("Sowed", "🌱"),
    Stage.germinated: ("Germinated", "🌿"),
    Stage.transplanted: ("Transplanted", "🪴"),
    Stage.hardened_off: ("Hardened off", "💪"),
    Stage.planted_out: ("Planted out", "🏡"),
    Stage.harvested: ("Harvesting", "🥬"),
}

# Every consumer table must cover its whole enum
for _table, _enum in ((STAGE_DISPLAY, Stage), (EVENT_STAGES, EventType)):
    _missing = set(_enum) - set(_table)
    if _missing:
        raise RuntimeError(f"unhandled {_enum.__name__} values: {sorted(m.value for m in _missing)}")
if set(STAGE_FIELDS) != set(STAGE_ORDER):
    raise RuntimeError("STAGE_FIELDS must map exactly the ordered stages")


def stage_date(plant: Plant, stage: Stage) -> Optional[str]:
    if stage is Stage.not_started:
        return None
    return getattr(plant, STAGE_FIELDS[stage])


def is_stage_complete(plant: Plant, stage: Stage) -> bool:
    return bool(stage_date(plant, stage))


def previous_stage(stage: Stage) -> Optional[Stage]:
    """Stage that must be complete before ``stage`` can be recorded."""
    if stage is Stage.not_started:
        return None
    index = STAGE_ORDER.index(stage)
    return STAGE_ORDER[index - 1] if index > 0 else None


def next_stage(stage: Stage) -> Optional[Stage]:
    if stage is Stage.not_started:
        return STAGE_ORDER[0]
    index = STAGE_ORDER.index(stage)
    return STAGE_ORDER[index + 1] if index + 1 < len(STAGE_ORDER) else None


def current_stage(plant: Plant) -> Stage:
    for stage in reversed(STAGE_ORDER):
        if is_stage_complete(plant, stage):
            return stage
    return Stage.not_started


def stage_index(stage: Stage) -> int:
    """0 for not-started, 1..6 along the stage order."""
    if stage is Stage.not_started:
        return 0
    return STAGE_ORDER.index(stage) + 1


def stage_display(stage: Stage) -> tuple[str, str]:
    """(label, emoji) for a stage."""
    return STAGE_DISPLAY[stage]
