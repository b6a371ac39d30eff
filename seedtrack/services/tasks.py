"""
Task derivation engine.

Turns plant snapshots plus the last-frost date into a ranked list of tasks.
Each transition fires when its prior stage is recorded and its own stage is
not, and only while the expected date sits inside the transition's window
around today. Stateless: task ids are "<type>-<plantId>", so recomputing on
every read yields the same identities.

Snapshots with gaps (a later stage recorded, an earlier one missing) are not
rejected here; every transition reads only its own two fields.
"""
import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable, Optional

from seedtrack.schemas.plant import Plant, Stage
from seedtrack.schemas.task import Task, TaskType
from seedtrack.services import dates
from seedtrack.services.stages import is_stage_complete

logger = logging.getLogger(__name__)

TASK_WINDOW_DAYS = 7
HARVEST_WINDOW_DAYS = 14


@dataclass(frozen=True)
class Transition:
    task_type: TaskType
    requires: Stage          # must be recorded
    completes: Stage         # must not be recorded yet
    window_days: int
    expected: Callable[[Plant, date], date]   # (plant, last frost) -> expected date


def _expected_germination(plant: Plant, last_frost: date) -> date:
    return dates.germination_date(plant.sowed_indoors, plant.days_to_germination)


def _expected_transplant(plant: Plant, last_frost: date) -> date:
    return dates.transplant_date(plant.germinated_date, plant.days_to_transplant)


def _expected_hardening(plant: Plant, last_frost: date) -> date:
    # Anchored on the frost date even when planted_out_date is already recorded
    plant_out = dates.plant_out_date(last_frost, plant.days_to_plant_out)
    return dates.harden_off_date(plant_out, plant.days_to_harden_off)


def _expected_plant_out(plant: Plant, last_frost: date) -> date:
    return dates.plant_out_date(last_frost, plant.days_to_plant_out)


def _expected_harvest(plant: Plant, last_frost: date) -> date:
    return dates.harvest_date(plant.planted_out_date, plant.days_to_harvest)


TRANSITIONS: list[Transition] = [
    Transition(TaskType.check_germination, Stage.sowed, Stage.germinated,
               TASK_WINDOW_DAYS, _expected_germination),
    Transition(TaskType.transplant, Stage.germinated, Stage.transplanted,
               TASK_WINDOW_DAYS, _expected_transplant),
    Transition(TaskType.start_hardening, Stage.transplanted, Stage.hardened_off,
               TASK_WINDOW_DAYS, _expected_hardening),
    Transition(TaskType.plant_out, Stage.hardened_off, Stage.planted_out,
               TASK_WINDOW_DAYS, _expected_plant_out),
    Transition(TaskType.check_harvest, Stage.planted_out, Stage.harvested,
               HARVEST_WINDOW_DAYS, _expected_harvest),
]

_DESCRIPTIONS: dict[TaskType, str] = {
    TaskType.check_germination: "Check if {name} has germinated",
    TaskType.transplant: "Transplant {name} to larger pots",
    TaskType.start_hardening: "Start hardening off {name}",
    TaskType.plant_out: "Plant out {name} in final position",
    TaskType.check_harvest: "Check {name} for harvest",
}

if set(_DESCRIPTIONS) != set(TaskType) or {t.task_type for t in TRANSITIONS} != set(TaskType):
    raise RuntimeError("every TaskType needs a transition and a description")


def task_id(task_type: TaskType, plant_id: str) -> str:
    return f"{task_type.value}-{plant_id}"


def describe_task(task_type: TaskType, plant_name: str) -> str:
    return _DESCRIPTIONS[task_type].format(name=plant_name)


def derive_tasks_for_plant(
    plant: Plant,
    last_frost_date: str,
    today: Optional[date] = None,
) -> list[Task]:
    """Tasks for one plant, at most one per transition kind."""
    if today is None:
        today = dates.today()
    last_frost = dates.to_local_date(last_frost_date)

    tasks: list[Task] = []
    for transition in TRANSITIONS:
        if not is_stage_complete(plant, transition.requires):
            continue
        if is_stage_complete(plant, transition.completes):
            continue

        due = transition.expected(plant, last_frost)
        days_diff = dates.days_between(due, today)
        if not -transition.window_days <= days_diff <= transition.window_days:
            continue

        tasks.append(Task(
            id=task_id(transition.task_type, plant.id),
            type=transition.task_type,
            plant_id=plant.id,
            plant_name=plant.name,
            due_date=due.isoformat(),
            description=describe_task(transition.task_type, plant.name),
            is_overdue=days_diff < 0,
            days_diff=days_diff,
        ))
    return tasks


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Overdue first, then ascending days_diff. Stable for ties."""
    return sorted(tasks, key=lambda t: (not t.is_overdue, t.days_diff))


def derive_tasks(
    plants: Iterable[Plant],
    last_frost_date: str,
    today: Optional[date] = None,
) -> list[Task]:
    if today is None:
        today = dates.today()
    dates.to_local_date(last_frost_date)   # fail fast on a bad frost date, even with no plants

    all_tasks: list[Task] = []
    for plant in plants:
        all_tasks.extend(derive_tasks_for_plant(plant, last_frost_date, today))

    logger.debug("derive_tasks: %d tasks for %s", len(all_tasks), today.isoformat())
    return sort_tasks(all_tasks)


@dataclass
class TaskGroups:
    overdue: list[Task]
    today: list[Task]
    upcoming: list[Task]


def group_tasks(tasks: Iterable[Task]) -> TaskGroups:
    groups = TaskGroups(overdue=[], today=[], upcoming=[])
    for task in tasks:
        if task.is_overdue:
            groups.overdue.append(task)
        elif task.days_diff == 0:
            groups.today.append(task)
        else:
            groups.upcoming.append(task)
    return groups
