import json
import uuid
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple
from pydantic import BaseModel
from models import Project, Task, User
from settings import DATA_DIR


def load_json(file_name: str, data_dir: str = DATA_DIR) -> Any:
    """
       Загружает данные из JSON-файла в папке с данными и возвращает их
    """
    data_path = Path(data_dir) / file_name
    if data_path.exists():
        with open(data_path, "r", encoding="utf-8") as file:
            return json.load(file)


def save_to_file(model: BaseModel, file_name: str, data_dir: str = DATA_DIR):
    data_path = Path(data_dir)
    data_path.mkdir(parents=True, exist_ok=True)
    with open(data_path / file_name, "w", encoding="utf-8") as f:
        f.write(model.model_dump_json(indent=2))


def new_id() -> str:
    """Идентификатор на основе времени."""
    return uuid.uuid1().hex


def users_by_id(users: Iterable[User]) -> Dict[str, User]:
    return {user.id: user for user in users}


def find_task(projects: Iterable[Project], task_id: str) -> Optional[Tuple[Project, Task]]:
    for project in projects:
        task = project.find_task(task_id)
        if task is not None:
            return project, task
    return None


def project_span(project: Project) -> Optional[Tuple[date, date]]:
    """Самая ранняя дата начала и самая поздняя дата окончания задач проекта."""
    if not project.tasks:
        return None
    return min(t.startDate for t in project.tasks), max(t.endDate for t in project.tasks)
