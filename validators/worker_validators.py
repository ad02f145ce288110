from typing import Dict
from models import Task, User


def validate_task_workers(task: Task, users: Dict[str, User], errors: list):
    for user_id in task.assignedUserIds:
        user = users.get(user_id)
        if user is None:
            errors.append(f"Задача {task.id} назначена неизвестному пользователю {user_id}")
        elif not user.is_worker:
            # назначать можно только операторов
            errors.append(
                f"Задача {task.id} назначена пользователю {user.name} ({user.id}) "
                f"с ролью {user.role.value}, а не оператору"
            )
