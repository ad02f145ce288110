import argparse
from datetime import date
from checker import check, dashboard_summary
from date_utils import parse_calendar_date
from gantt_chart import create_gantt_chart
from models import Project, ProjectType, Task, TaskStatus, User, UserRole, Specialty
from settings import DATA_DIR, GANTT_PORT
from store import ProjectStore


def seed_store(today: date) -> ProjectStore:
    """Начальные данные: мастер, четыре оператора и два проекта."""
    users = [
        User(id="u1", name="Admin Master", username="admin", role=UserRole.MASTER),
        User(id="u2", name="Juan Electricista", username="juan", role=UserRole.OPERARIO, specialty=Specialty.ELECTRICISTA),
        User(id="u3", name="Pedro Herrero", username="pedro", role=UserRole.OPERARIO, specialty=Specialty.HERRERO),
        User(id="u4", name="Luis Almacen", username="luis", role=UserRole.OPERARIO, specialty=Specialty.ALMACEN),
        User(id="u5", name="Ana Ingeniera", username="ana", role=UserRole.OPERARIO, specialty=Specialty.INGENIERO),
    ]
    store = ProjectStore(users=users)
    store.create_project(Project(
        id="p1",
        name="Reparación Generador",
        client="Hospital Central",
        type=ProjectType.AVERIA,
        tasks=[Task(
            id="t1",
            projectId="p1",
            name="Diagnóstico inicial",
            description="Revisar voltaje y cableado principal",
            startDate=today,
            endDate=today,
            estimatedHours=4,
            assignedUserIds=["u2"],
            status=TaskStatus.IN_PROGRESS
        )]
    ))
    store.create_project(Project(id="p2", name="Nave Industrial Zona B", client="Logística Sur", type=ProjectType.OBRA))
    return store


def parse_args():
    parser = argparse.ArgumentParser(description="Проверка плана работ по проектам")
    parser.add_argument("--data", default=DATA_DIR, help="папка с JSON-файлами")
    parser.add_argument("--seed", action="store_true", help="записать начальные данные в папку")
    parser.add_argument("--today", type=parse_calendar_date, default=None, help="дата для начальных данных, YYYY-MM-DD")
    parser.add_argument("--user", default=None, help="id пользователя для личной сводки")
    parser.add_argument("--gantt", action="store_true", help="показать диаграмму Ганта")
    parser.add_argument("--port", type=int, default=GANTT_PORT)
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()

    if args.seed:
        seed_store(args.today or date.today()).save(args.data)
        print(f"Начальные данные записаны в {args.data}")

    print("Начинаем проверку")
    store = ProjectStore.load(args.data)
    projects = store.project_list()
    print(f"Всего проектов: {len(projects)}")

    result = check(projects, store.user_list(), store.material_list())
    print(result)

    print("Сводка:")
    user = store.get_user(args.user) if args.user else None
    print(dashboard_summary(projects, store.material_list(), user))

    if args.gantt:
        create_gantt_chart(projects, store.user_list(), args.port)
