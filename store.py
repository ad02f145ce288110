from datetime import datetime
from typing import Dict, List, Optional
from pydantic import TypeAdapter
from models import (
    Project, Projects, Task, TaskStatus, User, Users, MaterialRequest, MaterialRequests,
    TimelineEntries, TimelineEntry, timeline_entry_for
)
from date_utils import calculate_end_date
from status import change_task_status
from settings import DATA_DIR, PROJECTS_FILE, USERS_FILE, MATERIALS_FILE, TIMELINE_FILE
from utils import load_json, save_to_file, new_id, find_task


class NotFoundError(KeyError):
    pass


class DuplicateIdError(ValueError):
    pass


def derive_end_date(task: Task) -> Task:
    """endDate всегда вычисляется из даты начала, часов и числа работников."""
    worker_count = len(task.assignedUserIds) or 1
    end_date = calculate_end_date(task.startDate, task.estimatedHours, worker_count)
    return task.model_copy(update={"endDate": end_date})


class ProjectStore:
    """
    Снимок данных приложения в памяти: проекты с задачами, пользователи,
    заявки на материалы и записи хронограммы.

    Каждая операция возвращает обновлённый агрегат.
    """

    def __init__(self, projects: Optional[List[Project]] = None, users: Optional[List[User]] = None,
                 materials: Optional[List[MaterialRequest]] = None,
                 timeline: Optional[List[TimelineEntry]] = None):
        self.projects: Dict[str, Project] = {p.id: p for p in projects or []}
        self.users: Dict[str, User] = {u.id: u for u in users or []}
        self.materials: Dict[str, MaterialRequest] = {m.id: m for m in materials or []}
        if timeline is None:
            timeline = [timeline_entry_for(t) for p in self.projects.values() for t in p.tasks]
        self.timeline: Dict[str, TimelineEntry] = {e.taskId: e for e in timeline}

    @classmethod
    def load(cls, data_dir: str = DATA_DIR) -> "ProjectStore":
        projects = TypeAdapter(Projects).validate_python(load_json(PROJECTS_FILE, data_dir) or [])
        users = TypeAdapter(Users).validate_python(load_json(USERS_FILE, data_dir) or [])
        materials = TypeAdapter(MaterialRequests).validate_python(load_json(MATERIALS_FILE, data_dir) or [])
        raw_timeline = load_json(TIMELINE_FILE, data_dir)
        timeline = None
        if raw_timeline is not None:
            timeline = TypeAdapter(TimelineEntries).validate_python(raw_timeline).root
        return cls(projects.root, users.root, materials.root, timeline)

    def save(self, data_dir: str = DATA_DIR):
        save_to_file(Projects(self.project_list()), PROJECTS_FILE, data_dir)
        save_to_file(Users(list(self.users.values())), USERS_FILE, data_dir)
        save_to_file(MaterialRequests(list(self.materials.values())), MATERIALS_FILE, data_dir)
        save_to_file(TimelineEntries(list(self.timeline.values())), TIMELINE_FILE, data_dir)

    def project_list(self) -> List[Project]:
        return list(self.projects.values())

    def user_list(self) -> List[User]:
        return list(self.users.values())

    def material_list(self) -> List[MaterialRequest]:
        return list(self.materials.values())

    # --- пользователи ---

    def get_user(self, user_id: str) -> User:
        if user_id not in self.users:
            raise NotFoundError(f"Пользователь {user_id} не найден")
        return self.users[user_id]

    def add_user(self, user: User) -> User:
        if user.id in self.users:
            raise DuplicateIdError(f"Пользователь {user.id} уже существует")
        self.users[user.id] = user
        return user

    def delete_user(self, user_id: str) -> User:
        # назначения в задачах не трогаем, висячие id покажет проверка
        user = self.get_user(user_id)
        del self.users[user_id]
        return user

    # --- проекты ---

    def get_project(self, project_id: str) -> Project:
        if project_id not in self.projects:
            raise NotFoundError(f"Проект {project_id} не найден")
        return self.projects[project_id]

    def create_project(self, project: Project) -> Project:
        if project.id in self.projects:
            raise DuplicateIdError(f"Проект {project.id} уже существует")
        tasks = [derive_end_date(t.model_copy(update={"projectId": project.id})) for t in project.tasks]
        project = project.model_copy(update={"tasks": tasks})
        self.projects[project.id] = project
        for task in tasks:
            self.timeline[task.id] = timeline_entry_for(task)
        return project

    def update_project(self, project_id: str, **fields) -> Project:
        # задачи меняются только через операции с задачами
        fields.pop("tasks", None)
        fields.pop("id", None)
        # повторная валидация, чтобы значения с провода стали перечислениями
        project = Project.model_validate({**self.get_project(project_id).model_dump(), **fields})
        self.projects[project_id] = project
        return project

    def delete_project(self, project_id: str) -> Project:
        project = self.get_project(project_id)
        for task in project.tasks:
            self.timeline.pop(task.id, None)
        del self.projects[project_id]
        return project

    # --- задачи ---

    def get_task(self, project_id: str, task_id: str) -> Task:
        task = self.get_project(project_id).find_task(task_id)
        if task is None:
            raise NotFoundError(f"Задача {task_id} не найдена в проекте {project_id}")
        return task

    def _replace_tasks(self, project: Project, tasks: List[Task]) -> Project:
        project = project.model_copy(update={"tasks": tasks})
        self.projects[project.id] = project
        return project

    def add_task(self, project_id: str, task: Task) -> Project:
        project = self.get_project(project_id)
        task = derive_end_date(task.model_copy(update={"projectId": project_id, "id": task.id or new_id()}))
        # записи хронограммы хранятся по id задачи, поэтому id уникален во всём снимке
        if find_task(self.projects.values(), task.id) is not None:
            raise DuplicateIdError(f"Задача {task.id} уже существует")
        self.timeline[task.id] = timeline_entry_for(task)
        return self._replace_tasks(project, project.tasks + [task])

    def update_task(self, project_id: str, task: Task) -> Project:
        project = self.get_project(project_id)
        self.get_task(project_id, task.id)
        task = derive_end_date(task.model_copy(update={"projectId": project_id}))
        self.timeline[task.id] = timeline_entry_for(task)
        return self._replace_tasks(project, [task if t.id == task.id else t for t in project.tasks])

    def delete_task(self, project_id: str, task_id: str) -> Project:
        project = self.get_project(project_id)
        self.get_task(project_id, task_id)
        # запись хронограммы удаляется вместе с задачей
        self.timeline.pop(task_id, None)
        return self._replace_tasks(project, [t for t in project.tasks if t.id != task_id])

    def set_task_status(self, user: User, project_id: str, task_id: str, status: TaskStatus) -> Project:
        task = change_task_status(user, self.get_task(project_id, task_id), status)
        return self.update_task(project_id, task)

    def set_observations(self, project_id: str, task_id: str, observations: str) -> Project:
        task = self.get_task(project_id, task_id).model_copy(update={"observations": observations})
        return self.update_task(project_id, task)

    # --- заявки на материалы ---

    def get_material_request(self, request_id: str) -> MaterialRequest:
        if request_id not in self.materials:
            raise NotFoundError(f"Заявка {request_id} не найдена")
        return self.materials[request_id]

    def add_material_request(self, project_id: str, task_id: str, requested_by: str, items: List[str],
                             created_at: Optional[datetime] = None) -> MaterialRequest:
        self.get_task(project_id, task_id)
        request = MaterialRequest(
            id=new_id(),
            taskId=task_id,
            projectId=project_id,
            requestedByUserId=requested_by,
            # пустые строки из формы отбрасываем
            items=[item.strip() for item in items if item.strip()],
            createdAt=created_at or datetime.now()
        )
        self.materials[request.id] = request
        return request

    def update_material_request(self, request: MaterialRequest) -> MaterialRequest:
        self.get_material_request(request.id)
        self.materials[request.id] = request
        return request

    def delete_material_request(self, request_id: str) -> MaterialRequest:
        request = self.get_material_request(request_id)
        del self.materials[request_id]
        return request

    def unhandled_material_requests(self) -> List[MaterialRequest]:
        """Заявки, которые ещё никто не взял; новые сверху."""
        requests = [m for m in self.materials.values() if m.handledByUserId is None]
        return sorted(requests, key=lambda m: m.createdAt, reverse=True)
