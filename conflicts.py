from datetime import date
from typing import Dict, Iterable, Iterator, List, Optional
from models import Project, Task, User


def spans_overlap(start1: date, end1: date, start2: date, end2: date) -> bool:
    """Пересечение отрезков дат, концы включаются."""
    return start1 <= end2 and start2 <= end1


def live_tasks_of(worker_id: str, projects: Iterable[Project], exclude_task_id: Optional[str] = None) -> Iterator[Task]:
    # проходим все задачи всех проектов, индекс не ведём
    for project in projects:
        for task in project.tasks:
            if exclude_task_id is not None and task.id == exclude_task_id:
                continue
            if worker_id in task.assignedUserIds and task.is_live:
                yield task


def has_conflict(worker_id: str, proposed_start: date, proposed_end: date,
                 projects: Iterable[Project], exclude_task_id: Optional[str] = None) -> bool:
    """
    Проверяет, занят ли работник в другой незавершённой задаче в указанные даты.

    Args:
        worker_id: идентификатор работника
        proposed_start: предлагаемая дата начала
        proposed_end: предлагаемая дата окончания
        projects: все проекты с задачами
        exclude_task_id: задача, которую сейчас редактируют (сама с собой не конфликтует)

    Returns:
        bool: True, если найдено пересечение
    """
    return any(
        spans_overlap(proposed_start, proposed_end, task.startDate, task.endDate)
        for task in live_tasks_of(worker_id, projects, exclude_task_id)
    )


def conflicting_workers(worker_ids: Iterable[str], proposed_start: date, proposed_end: date,
                        projects: Iterable[Project], users: Iterable[User],
                        exclude_task_id: Optional[str] = None) -> List[str]:
    """Имена работников, у которых есть конфликт; порядок как в списке пользователей."""
    projects = list(projects)
    busy = {
        worker_id for worker_id in worker_ids
        if has_conflict(worker_id, proposed_start, proposed_end, projects, exclude_task_id)
    }
    return [user.name for user in users if user.id in busy]


def conflicting_task_pairs(projects: Iterable[Project]) -> Dict[str, List[tuple[Task, Task]]]:
    """
    Все пары пересекающихся незавершённых задач по каждому работнику.
    Каждая пара попадает в результат один раз.
    """
    by_worker: Dict[str, List[Task]] = {}
    for project in projects:
        for task in project.tasks:
            if not task.is_live:
                continue
            for worker_id in set(task.assignedUserIds):
                by_worker.setdefault(worker_id, []).append(task)

    result = {}
    for worker_id, tasks in by_worker.items():
        pairs = []
        for i, first in enumerate(tasks):
            for second in tasks[i + 1:]:
                if spans_overlap(first.startDate, first.endDate, second.startDate, second.endDate):
                    pairs.append((first, second))
        if pairs:
            result[worker_id] = pairs
    return result
