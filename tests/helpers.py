from datetime import date
from models import Project, ProjectType, Task, TaskStatus, User, UserRole, Specialty

MONDAY = date(2024, 1, 1)

MASTER = User(id="u1", name="Admin Master", username="admin", role=UserRole.MASTER)
JUAN = User(id="u2", name="Juan Electricista", username="juan", role=UserRole.OPERARIO, specialty=Specialty.ELECTRICISTA)
PEDRO = User(id="u3", name="Pedro Herrero", username="pedro", role=UserRole.OPERARIO, specialty=Specialty.HERRERO)
LUIS = User(id="u4", name="Luis Almacen", username="luis", role=UserRole.OPERARIO, specialty=Specialty.ALMACEN)
ANA = User(id="u5", name="Ana Ingeniera", username="ana", role=UserRole.OPERARIO, specialty=Specialty.INGENIERO)
USERS = [MASTER, JUAN, PEDRO, LUIS, ANA]


def make_task(task_id="t1", project_id="p1", start=MONDAY, end=None, hours=8, workers=("u2",),
              status=TaskStatus.IN_PROGRESS, name=None) -> Task:
    return Task(
        id=task_id,
        projectId=project_id,
        name=name or f"Tarea {task_id}",
        startDate=start,
        endDate=end or start,
        estimatedHours=hours,
        assignedUserIds=list(workers),
        status=status
    )


def make_project(project_id="p1", tasks=(), project_type=ProjectType.OBRA) -> Project:
    return Project(
        id=project_id,
        name=f"Proyecto {project_id}",
        client="Logística Sur",
        type=project_type,
        tasks=list(tasks)
    )
