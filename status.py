from typing import Optional
from models import Task, TaskStatus, User, MaterialRequest, MaterialStatus, is_warehouse_worker


class StatusTransitionError(Exception):
    pass


# переходы статусов задачи, разрешённые назначенному работнику
TASK_TRANSITIONS = {
    TaskStatus.PENDING: {TaskStatus.IN_PROGRESS},
    TaskStatus.IN_PROGRESS: {TaskStatus.COMPLETED},
    TaskStatus.COMPLETED: set(),
    TaskStatus.REVIEWED: set(),
}

# переходы заявок на материалы (для мастера и работников склада)
MATERIAL_TRANSITIONS = {
    MaterialStatus.PENDING: {MaterialStatus.PREPARING},
    MaterialStatus.PREPARING: {MaterialStatus.READY},
    MaterialStatus.READY: set(),
}


def can_change_task_status(user: User, task: Task, new_status: TaskStatus) -> bool:
    if new_status == task.status:
        return True
    # мастер может выставить любой статус, в том числе Revisado
    if user.is_master:
        return True
    if user.id not in task.assignedUserIds:
        return False
    return new_status in TASK_TRANSITIONS[task.status]


def change_task_status(user: User, task: Task, new_status: TaskStatus) -> Task:
    if not can_change_task_status(user, task, new_status):
        raise StatusTransitionError(
            f"Пользователь {user.name} ({user.id}) не может перевести задачу {task.id} "
            f"из статуса '{task.status.value}' в '{new_status.value}'"
        )
    return task.model_copy(update={"status": new_status})


def can_handle_materials(user: User) -> bool:
    return user.is_master or is_warehouse_worker(user)


def _check_material_handler(user: User, request: MaterialRequest):
    if not can_handle_materials(user):
        raise StatusTransitionError(
            f"Пользователь {user.name} ({user.id}) не может обрабатывать заявку {request.id}"
        )


def change_material_status(user: User, request: MaterialRequest, new_status: MaterialStatus,
                           handler_id: Optional[str] = None) -> MaterialRequest:
    _check_material_handler(user, request)
    if new_status != request.status and new_status not in MATERIAL_TRANSITIONS[request.status]:
        raise StatusTransitionError(
            f"Заявку {request.id} нельзя перевести из '{request.status.value}' в '{new_status.value}'"
        )
    update = {"status": new_status}
    if handler_id is not None:
        update["handledByUserId"] = handler_id
    return request.model_copy(update=update)


def accept_material_request(user: User, request: MaterialRequest) -> MaterialRequest:
    """Работник склада берёт заявку себе: статус En Preparación."""
    if request.handledByUserId is not None:
        raise StatusTransitionError(f"Заявка {request.id} уже принята пользователем {request.handledByUserId}")
    return change_material_status(user, request, MaterialStatus.PREPARING, handler_id=user.id)


def reassign_material_request(user: User, request: MaterialRequest, new_handler: User) -> MaterialRequest:
    _check_material_handler(user, request)
    if not is_warehouse_worker(new_handler) or new_handler.id == request.handledByUserId:
        raise StatusTransitionError(
            f"Заявку {request.id} нельзя передать пользователю {new_handler.name} ({new_handler.id})"
        )
    return request.model_copy(update={"handledByUserId": new_handler.id})
