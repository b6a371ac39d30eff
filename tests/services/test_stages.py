from itertools import product

from seedtrack.schemas.plant import EventType, Plant, PlantCategory, Stage
from seedtrack.services.stages import (
    EVENT_STAGES,
    STAGE_DISPLAY,
    STAGE_FIELDS,
    STAGE_ORDER,
    current_stage,
    is_stage_complete,
    previous_stage,
    stage_display,
    stage_index,
)

FIELDS = [STAGE_FIELDS[s] for s in STAGE_ORDER]


def _plant(**dates) -> Plant:
    return Plant(
        id="p1",
        template_id="tomato-moneymaker",
        name="Tomato",
        category=PlantCategory.veg,
        days_to_germination=7,
        days_to_transplant=21,
        days_to_harden_off=7,
        days_to_plant_out=0,
        days_to_harvest=80,
        **dates,
    )


def test_stage_fields_follow_the_fixed_order():
    assert FIELDS == [
        "sowed_indoors",
        "germinated_date",
        "transplanted_date",
        "hardened_off_date",
        "planted_out_date",
        "first_harvest_date",
    ]


def test_current_stage_not_started():
    assert current_stage(_plant()) is Stage.not_started


def test_current_stage_is_last_recorded_stage():
    plant = _plant(sowed_indoors="2024-03-01")
    assert current_stage(plant) is Stage.sowed

    plant = _plant(sowed_indoors="2024-03-01", germinated_date="2024-03-08")
    assert current_stage(plant) is Stage.germinated

    all_set = {field: "2024-03-01" for field in FIELDS}
    assert current_stage(_plant(**all_set)) is Stage.harvested


def test_current_stage_uses_highest_field_not_count():
    # Gaps are tolerated: only planted_out_date recorded
    plant = _plant(planted_out_date="2024-05-15")
    assert current_stage(plant) is Stage.planted_out


def test_empty_string_counts_as_unset():
    plant = _plant(sowed_indoors="2024-03-01", germinated_date="")
    assert current_stage(plant) is Stage.sowed
    assert not is_stage_complete(plant, Stage.germinated)


def test_current_stage_is_monotonic_over_every_combination():
    for mask in product([False, True], repeat=len(FIELDS)):
        values = {f: "2024-04-01" for f, on in zip(FIELDS, mask) if on}
        base = stage_index(current_stage(_plant(**values)))
        for i, field in enumerate(FIELDS):
            if mask[i]:
                continue
            more = {**values, field: "2024-04-02"}
            assert stage_index(current_stage(_plant(**more))) >= base


def test_previous_stage():
    assert previous_stage(Stage.sowed) is None
    assert previous_stage(Stage.germinated) is Stage.sowed
    assert previous_stage(Stage.harvested) is Stage.planted_out
    assert previous_stage(Stage.not_started) is None


def test_stage_display_covers_every_stage():
    assert set(STAGE_DISPLAY) == set(Stage)
    for stage in Stage:
        label, emoji = stage_display(stage)
        assert label
        assert emoji
    assert stage_display(Stage.hardened_off)[0] == "Hardened off"


def test_every_event_type_is_mapped():
    assert set(EVENT_STAGES) == set(EventType)
    assert EVENT_STAGES[EventType.note] is None
    assert EVENT_STAGES[EventType.hardened] is Stage.hardened_off
