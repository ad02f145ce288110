from datetime import date
from typing import List, Optional
from models import Project, Task, TaskDraft, TaskStatus, User
from conflicts import conflicting_workers, live_tasks_of
from date_utils import calculate_end_date
from utils import new_id


class TaskEditor:
    """
    Форма создания/редактирования задачи.

    Работает со снимком проектов, который передаёт вызывающий; сам снимок не меняет.
    Конфликты только предупреждают, сохранить задачу можно всегда.
    """

    def __init__(self, projects: List[Project], users: List[User], project_id: str,
                 draft: TaskDraft, editing_task_id: Optional[str] = None):
        self.projects = projects
        self.users = users
        self.project_id = project_id
        self.draft = draft
        self.editing_task_id = editing_task_id
        self.conflicts: List[str] = []

    @classmethod
    def from_task(cls, projects: List[Project], users: List[User], task: Task) -> "TaskEditor":
        draft = TaskDraft(
            name=task.name,
            description=task.description,
            startDate=task.startDate,
            estimatedHours=task.estimatedHours,
            assignedUserIds=list(task.assignedUserIds)
        )
        # старые конфликты не переносим, они пересчитаются при изменении работников
        return cls(projects, users, task.projectId, draft, editing_task_id=task.id)

    def end_date(self) -> date:
        # без работников длительность считаем как для одного
        worker_count = len(self.draft.assignedUserIds) or 1
        return calculate_end_date(self.draft.startDate, self.draft.estimatedHours, worker_count)

    def refresh_conflicts(self) -> List[str]:
        # при изменении состава меняется срок для всех, поэтому проверяем каждого назначенного
        self.conflicts = conflicting_workers(
            self.draft.assignedUserIds,
            self.draft.startDate,
            self.end_date(),
            self.projects,
            self.users,
            self.editing_task_id
        )
        return self.conflicts

    def toggle_worker(self, user_id: str) -> List[str]:
        current = self.draft.assignedUserIds
        if user_id in current:
            updated = [uid for uid in current if uid != user_id]
        else:
            updated = current + [user_id]
        self.draft = self.draft.model_copy(update={"assignedUserIds": updated})
        return self.refresh_conflicts()

    def reschedule(self, start_date: Optional[date] = None, estimated_hours: Optional[float] = None) -> List[str]:
        update = {}
        if start_date is not None:
            update["startDate"] = start_date
        if estimated_hours is not None:
            update["estimatedHours"] = estimated_hours
        # повторная валидация черновика, чтобы отрицательные часы не прошли
        self.draft = TaskDraft.model_validate({**self.draft.model_dump(), **update})
        return self.refresh_conflicts()

    def build_task(self) -> Task:
        """Задача для сохранения: новая (Pendiente) или отредактированная с пересчитанным endDate."""
        fields = dict(
            name=self.draft.name,
            description=self.draft.description,
            startDate=self.draft.startDate,
            estimatedHours=self.draft.estimatedHours,
            assignedUserIds=list(self.draft.assignedUserIds),
            endDate=self.end_date()
        )
        if self.editing_task_id is not None:
            project = next((p for p in self.projects if p.id == self.project_id), None)
            original = project.find_task(self.editing_task_id) if project else None
            if original is not None:
                # статус и наблюдения остаются прежними
                return original.model_copy(update=fields)

        return Task(
            id=new_id(),
            projectId=self.project_id,
            status=TaskStatus.PENDING,
            **fields
        )


def worker_tasks(projects: List[Project], user_id: str) -> List[Task]:
    """Незавершённые задачи работника."""
    return list(live_tasks_of(user_id, projects))


def active_tasks_for(projects: List[Project], user: User) -> List[Task]:
    """Задачи работника, которые он ещё видит у себя: всё, кроме проверенных мастером."""
    return [
        task
        for project in projects
        for task in project.tasks
        if user.id in task.assignedUserIds and task.status != TaskStatus.REVIEWED
    ]
