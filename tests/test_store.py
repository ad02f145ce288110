from datetime import date, datetime
import pytest
from pydantic import ValidationError
from gantt_chart import build_gantt_rows
from models import Project, ProjectType, TaskStatus, User, UserRole, Specialty
from status import StatusTransitionError
from store import DuplicateIdError, NotFoundError, ProjectStore
from helpers import JUAN, MASTER, MONDAY, USERS, make_project, make_task


def new_store():
    store = ProjectStore(users=USERS)
    store.create_project(make_project("p1"))
    return store


def test_add_task_derives_end_date_and_timeline_entry():
    store = new_store()
    project = store.add_task("p1", make_task("t1", hours=40, workers=("u2",)))
    task = project.tasks[0]
    assert task.endDate == date(2024, 1, 5)
    entry = store.timeline["t1"]
    assert entry.id == "timeline-t1"
    assert (entry.startDate, entry.endDate) == (MONDAY, date(2024, 1, 5))


def test_update_task_rederives_end_date():
    store = new_store()
    store.add_task("p1", make_task("t1", hours=40, workers=("u2",)))
    changed = store.get_task("p1", "t1").model_copy(update={"assignedUserIds": ["u2", "u3"], "endDate": MONDAY})
    project = store.update_task("p1", changed)
    assert project.tasks[0].endDate == date(2024, 1, 3)
    assert store.timeline["t1"].endDate == date(2024, 1, 3)


def test_delete_task_removes_timeline_entry():
    store = new_store()
    store.add_task("p1", make_task("t1"))
    project = store.delete_task("p1", "t1")
    assert project.tasks == []
    assert "t1" not in store.timeline


def test_delete_project_removes_its_timeline_entries():
    store = new_store()
    store.add_task("p1", make_task("t1"))
    store.add_task("p1", make_task("t2"))
    store.delete_project("p1")
    assert store.timeline == {}
    with pytest.raises(NotFoundError):
        store.get_project("p1")


def test_update_project_keeps_tasks():
    store = new_store()
    store.add_task("p1", make_task("t1"))
    project = store.update_project("p1", name="Nave B", tasks=[])
    assert project.name == "Nave B"
    assert [t.id for t in project.tasks] == ["t1"]


def test_missing_task_raises_not_found():
    store = new_store()
    with pytest.raises(NotFoundError):
        store.update_task("p1", make_task("nope"))
    with pytest.raises(NotFoundError):
        store.add_task("p404", make_task("t1"))


def test_set_task_status_respects_roles():
    store = new_store()
    store.add_task("p1", make_task("t1", status=TaskStatus.COMPLETED, workers=("u2",)))
    with pytest.raises(StatusTransitionError):
        store.set_task_status(JUAN, "p1", "t1", TaskStatus.REVIEWED)
    project = store.set_task_status(MASTER, "p1", "t1", TaskStatus.REVIEWED)
    assert project.tasks[0].status == TaskStatus.REVIEWED


def test_observations():
    store = new_store()
    store.add_task("p1", make_task("t1"))
    assert store.set_observations("p1", "t1", "falta material").tasks[0].observations == "falta material"


def test_material_requests_lifecycle():
    store = new_store()
    store.add_task("p1", make_task("t1"))
    first = store.add_material_request("p1", "t1", "u2", ["tornillos", " ", "cable "],
                                       created_at=datetime(2024, 1, 1, 8))
    second = store.add_material_request("p1", "t1", "u2", ["brida"], created_at=datetime(2024, 1, 2, 8))
    assert first.items == ["tornillos", "cable"]
    assert store.unhandled_material_requests() == [second, first]

    store.update_material_request(second.model_copy(update={"handledByUserId": "u4"}))
    assert store.unhandled_material_requests() == [first]

    store.delete_material_request(first.id)
    with pytest.raises(NotFoundError):
        store.get_material_request(first.id)


def test_material_request_needs_existing_task():
    with pytest.raises(NotFoundError):
        new_store().add_material_request("p1", "t404", "u2", ["brida"])


def test_save_and_load_round_trip(tmp_path):
    store = new_store()
    store.create_project(Project(id="p2", name="Generador", client="Hospital", type=ProjectType.AVERIA))
    store.add_task("p1", make_task("t1", hours=12, workers=("u2",)))
    store.add_material_request("p1", "t1", "u2", ["cable"])
    store.save(str(tmp_path))

    loaded = ProjectStore.load(str(tmp_path))
    assert loaded.project_list() == store.project_list()
    assert loaded.user_list() == store.user_list()
    assert loaded.material_list() == store.material_list()
    assert loaded.timeline == store.timeline


def test_load_empty_directory(tmp_path):
    store = ProjectStore.load(str(tmp_path))
    assert store.project_list() == []
    assert store.timeline == {}


def test_add_and_delete_user():
    store = new_store()
    marta = User(id="u6", name="Marta Montadora", username="marta", role=UserRole.OPERARIO,
                 specialty=Specialty.MONTADOR)
    assert store.add_user(marta) == marta
    assert store.get_user("u6") == marta
    with pytest.raises(DuplicateIdError):
        store.add_user(marta)

    assert store.delete_user("u6") == marta
    assert "u6" not in [u.id for u in store.user_list()]
    with pytest.raises(NotFoundError):
        store.get_user("u6")
    with pytest.raises(NotFoundError):
        store.delete_user("u6")


def test_update_project_validates_wire_values():
    store = new_store()
    store.add_task("p1", make_task("t1"))
    project = store.update_project("p1", type="Avería", client="Hospital Central")
    assert project.type == ProjectType.AVERIA
    assert build_gantt_rows(store.project_list(), USERS)[0]['Description'].startswith("Proyecto: Proyecto p1 (Avería)")

    with pytest.raises(ValidationError):
        store.update_project("p1", name=None)
    with pytest.raises(ValidationError):
        store.update_project("p1", type="Reforma")
    assert store.get_project("p1").name == "Proyecto p1"


def test_duplicate_ids_are_rejected():
    store = new_store()
    store.add_task("p1", make_task("t1"))
    with pytest.raises(DuplicateIdError):
        store.add_task("p1", make_task("t1"))
    store.create_project(make_project("p2"))
    with pytest.raises(DuplicateIdError):
        store.add_task("p2", make_task("t1", project_id="p2"))
    with pytest.raises(DuplicateIdError):
        store.create_project(make_project("p2"))
    assert [t.id for t in store.get_project("p1").tasks] == ["t1"]
    assert list(store.timeline) == ["t1"]
