from typing import Dict, List
from models import Project, Task, User
from conflicts import conflicting_task_pairs
from date_utils import calculate_end_date, calculate_working_days, days_needed, is_weekend


def validate_task_overlap(projects: List[Project], users: Dict[str, User], warnings: list):
    # двойное бронирование не запрещено, поэтому это предупреждение, а не ошибка
    for worker_id, pairs in conflicting_task_pairs(projects).items():
        worker = users.get(worker_id)
        worker_name = worker.name if worker else worker_id
        for first, second in pairs:
            warnings.append(
                f"Задача {first.id} (с {first.startDate} по {first.endDate}) "
                f"пересекается с задачей {second.id} "
                f"(с {second.startDate} по {second.endDate}) "
                f"у работника {worker_name} ({worker_id})"
            )


def validate_task_dates(project: Project, task: Task, errors: list, warnings: list):
    """Проверяет принадлежность задачи проекту и согласованность дат."""
    if task.projectId != project.id:
        errors.append(f"Задача {task.id} лежит в проекте {project.id}, но ссылается на проект {task.projectId}")

    if task.endDate < task.startDate:
        errors.append(f"Задача {task.id} заканчивается {task.endDate} раньше, чем начинается {task.startDate}")
        return

    worker_count = len(task.assignedUserIds) or 1
    expected_end = calculate_end_date(task.startDate, task.estimatedHours, worker_count)
    if expected_end != task.endDate:
        expected_days = max(days_needed(task.estimatedHours, worker_count), 1)
        warnings.append(
            f"Задача {task.id} имеет рассчитанную длительность {expected_days} раб.дн. "
            f"(до {expected_end}), но сохранённые даты дают "
            f"{calculate_working_days(task.startDate, task.endDate)} раб.дн. "
            f"(с {task.startDate} по {task.endDate})"
        )

    if is_weekend(task.startDate):
        warnings.append(f"Задача {task.id} начинается в выходной день {task.startDate}")
