from datetime import date
from typing import List
from pydantic import BaseModel, RootModel
from .projects import Task


class TimelineEntry(BaseModel):
    id: str
    taskId: str
    projectId: str
    title: str
    startDate: date
    endDate: date


def timeline_entry_for(task: Task) -> TimelineEntry:
    return TimelineEntry(
        id=f"timeline-{task.id}",
        taskId=task.id,
        projectId=task.projectId,
        title=task.name,
        startDate=task.startDate,
        endDate=task.endDate
    )


TimelineEntries = RootModel[List[TimelineEntry]]
