from fastapi import APIRouter

from seedtrack.core.deps import Today
from seedtrack.schemas.task import TaskListRequest, TaskListResponse, TaskRead
from seedtrack.services.dates import relative_label
from seedtrack.services.tasks import derive_tasks, group_tasks

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post("", response_model=TaskListResponse)
async def list_tasks(data: TaskListRequest, today: Today):
    tasks = derive_tasks(data.plants, data.last_frost_date, today)
    groups = group_tasks(tasks)

    return TaskListResponse(
        today=today.isoformat(),
        tasks=[
            TaskRead(**t.model_dump(), relative_label=relative_label(t.due_date, today))
            for t in tasks
        ],
        overdue=[t.id for t in groups.overdue],
        due_today=[t.id for t in groups.today],
        upcoming=[t.id for t in groups.upcoming],
    )
