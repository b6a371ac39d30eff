from enum import Enum

from seedtrack.schemas.base import CamelModel
from seedtrack.schemas.plant import Plant


class TaskType(str, Enum):
    check_germination = "check-germination"
    transplant = "transplant"
    start_hardening = "start-hardening"
    plant_out = "plant-out"
    check_harvest = "check-harvest"


class Task(CamelModel):
    id: str
    type: TaskType
    plant_id: str
    plant_name: str
    due_date: str
    description: str
    is_overdue: bool
    days_diff: int   # negative = overdue, 0 = today, positive = upcoming

    model_config = {**CamelModel.model_config, "frozen": True}


class TaskListRequest(CamelModel):
    plants: list[Plant]
    last_frost_date: str


class TaskRead(Task):
    relative_label: str


class TaskListResponse(CamelModel):
    today: str
    tasks: list[TaskRead]
    overdue: list[str]
    due_today: list[str]
    upcoming: list[str]
