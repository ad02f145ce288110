from typing import Dict, List
from models import MaterialRequest, Project, User, is_warehouse_worker
from utils import find_task


def validate_material_request(request: MaterialRequest, projects: List[Project], users: Dict[str, User],
                              errors: list):
    found = find_task(projects, request.taskId)
    if found is None:
        errors.append(f"Заявка {request.id} ссылается на несуществующую задачу {request.taskId}")
    elif found[0].id != request.projectId:
        errors.append(
            f"Заявка {request.id} указывает проект {request.projectId}, "
            f"но задача {request.taskId} принадлежит проекту {found[0].id}"
        )

    if request.requestedByUserId not in users:
        errors.append(f"Заявка {request.id} создана неизвестным пользователем {request.requestedByUserId}")

    if request.handledByUserId is not None:
        handler = users.get(request.handledByUserId)
        if handler is None or not (handler.is_master or is_warehouse_worker(handler)):
            errors.append(
                f"Заявку {request.id} обрабатывает пользователь {request.handledByUserId}, "
                f"который не работает на складе"
            )
