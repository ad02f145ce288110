from typing import List, Optional
from pydantic import BaseModel
from models import Project, ProjectType, User, MaterialRequest, MaterialStatus, TaskStatus, FINISHED_STATUSES
from conflicts import conflicting_task_pairs
from utils import users_by_id
from validators import validate_task_dates, validate_task_overlap, validate_material_request, \
    validate_task_workers


class CheckResult(BaseModel):
    success: bool
    total_projects: int
    total_tasks: int
    live_tasks: int
    conflicts: int
    errors: List[str]
    warnings: List[str]

    def __str__(self):
        w = "\n\t\t ".join(self.warnings)
        e = "\n\t\t ".join(self.errors)
        return (
            f"  Проверка пройдена: {self.success}\n"
            f"  Проектов: {self.total_projects}\n"
            f"  Задач всего: {self.total_tasks}\n"
            f"  Задач в работе: {self.live_tasks}\n"
            f"  Конфликтов: {self.conflicts}\n"
            f"  Предупреждения:\n\t\t {w}\n"
            f"  Ошибки:\n\t\t {e}\n"
        )


def check(projects: List[Project], users: List[User], materials: List[MaterialRequest]) -> CheckResult:
    result = CheckResult(
        success=False,
        total_projects=len(projects),
        total_tasks=0,
        live_tasks=0,
        conflicts=0,
        errors=[],
        warnings=[]
    )

    user_dict = users_by_id(users)
    for project in projects:
        for task in project.tasks:
            result.total_tasks += 1
            if task.is_live:
                result.live_tasks += 1

            # критические проверки
            validate_task_workers(task, user_dict, result.errors)
            # согласованность дат
            validate_task_dates(project, task, result.errors, result.warnings)

    # конфликты только предупреждают
    validate_task_overlap(projects, user_dict, result.warnings)
    result.conflicts = sum(len(pairs) for pairs in conflicting_task_pairs(projects).values())

    for request in materials:
        validate_material_request(request, projects, user_dict, result.errors)

    # проверка успешна, если нет критических ошибок
    result.success = len(result.errors) == 0
    return result


class DashboardSummary(BaseModel):
    pending_tasks: int
    in_progress_tasks: int
    completed_tasks: int
    active_averias: int
    active_obras: int
    pending_materials: int

    def __str__(self):
        return (
            f"  Задачи: ожидают {self.pending_tasks}, в работе {self.in_progress_tasks}, "
            f"завершены {self.completed_tasks}\n"
            f"  Активные аварии: {self.active_averias}\n"
            f"  Активные объекты: {self.active_obras}\n"
            f"  Заявок на материалы не готово: {self.pending_materials}\n"
        )


def is_project_active(project: Project) -> bool:
    # новый проект без задач считается открытым
    if not project.tasks:
        return True
    return any(task.status not in FINISHED_STATUSES for task in project.tasks)


def dashboard_summary(projects: List[Project], materials: List[MaterialRequest],
                      user: Optional[User] = None) -> DashboardSummary:
    """
    Сводка для главной страницы.

    Для оператора учитываются только его задачи, проекты, где он когда-либо был
    назначен, и заявки, созданные им самим. Для мастера или без пользователя - всё.
    """
    only_mine = user is not None and user.is_worker

    tasks = [task for project in projects for task in project.tasks]
    if only_mine:
        tasks = [task for task in tasks if user.id in task.assignedUserIds]
        projects = [p for p in projects if any(user.id in t.assignedUserIds for t in p.tasks)]
        materials = [m for m in materials if m.requestedByUserId == user.id]

    active = [p for p in projects if is_project_active(p)]
    return DashboardSummary(
        pending_tasks=sum(1 for t in tasks if t.status == TaskStatus.PENDING),
        in_progress_tasks=sum(1 for t in tasks if t.status == TaskStatus.IN_PROGRESS),
        completed_tasks=sum(1 for t in tasks if t.status in FINISHED_STATUSES),
        active_averias=sum(1 for p in active if p.type == ProjectType.AVERIA),
        active_obras=sum(1 for p in active if p.type == ProjectType.OBRA),
        pending_materials=sum(1 for m in materials if m.status != MaterialStatus.READY)
    )
