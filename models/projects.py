from datetime import date
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, RootModel


class TaskStatus(str, Enum):
    PENDING = "Pendiente"
    IN_PROGRESS = "En Curso"
    COMPLETED = "Completado"  # ждёт проверки мастером
    REVIEWED = "Revisado"


# задачи в этих статусах больше не занимают работников
FINISHED_STATUSES = frozenset({TaskStatus.COMPLETED, TaskStatus.REVIEWED})


class ProjectType(str, Enum):
    AVERIA = "Avería"
    OBRA = "Obra"


class Task(BaseModel):
    id: str
    projectId: str
    name: str
    description: str = ""
    startDate: date
    estimatedHours: float = Field(ge=0, allow_inf_nan=False)
    endDate: date
    assignedUserIds: List[str] = []
    status: TaskStatus = TaskStatus.PENDING
    observations: Optional[str] = None

    @property
    def is_live(self) -> bool:
        return self.status not in FINISHED_STATUSES


class TaskDraft(BaseModel):
    """Данные формы редактирования задачи, endDate здесь нет - он всегда вычисляется."""
    name: str = ""
    description: str = ""
    startDate: date
    estimatedHours: float = Field(default=8, ge=0, allow_inf_nan=False)
    assignedUserIds: List[str] = []


class Project(BaseModel):
    id: str
    name: str
    client: str
    type: ProjectType
    tasks: List[Task] = []

    def find_task(self, task_id: str) -> Optional[Task]:
        return next((t for t in self.tasks if t.id == task_id), None)


Projects = RootModel[List[Project]]
