from datetime import date
from gantt_chart import UNASSIGNED_COLOR, build_gantt_rows, grid_column, project_grid_column
from models import SPECIALTY_COLORS, Specialty
from helpers import USERS, make_project, make_task

TODAY = date(2024, 1, 10)


def test_grid_column_inside_window():
    assert grid_column(TODAY, date(2024, 1, 12), TODAY) == (1, 3)
    assert grid_column(date(2024, 1, 15), date(2024, 1, 15), TODAY) == (6, 1)


def test_grid_column_clips_to_window():
    assert grid_column(date(2024, 1, 8), date(2024, 1, 12), TODAY) == (1, 5)
    assert grid_column(date(2024, 2, 5), date(2024, 2, 20), TODAY) == (27, 4)


def test_grid_column_outside_window():
    assert grid_column(date(2024, 3, 1), date(2024, 3, 2), TODAY) is None
    assert grid_column(date(2024, 2, 9), date(2024, 2, 12), TODAY) is None


def test_project_summary_span():
    project = make_project("p1", [
        make_task("t1", start=date(2024, 1, 11), end=date(2024, 1, 12)),
        make_task("t2", start=date(2024, 1, 15), end=date(2024, 1, 19)),
    ])
    assert project_grid_column(project, TODAY) == (2, 9)
    assert project_grid_column(make_project("p2"), TODAY) is None


def test_rows_per_worker_and_unassigned():
    projects = [make_project("p1", [
        make_task("t1", start=date(2024, 1, 1), end=date(2024, 1, 5), workers=("u2", "u3")),
        make_task("t2", workers=()),
    ])]
    rows = build_gantt_rows(projects, USERS)
    assert [row['Task'] for row in rows] == ["Juan Electricista", "Pedro Herrero", "Sin asignar"]
    assert rows[0]['Finish'] == "2024-01-06"
    assert rows[0]['Color'] == SPECIALTY_COLORS[Specialty.ELECTRICISTA]
    assert rows[2]['Color'] == UNASSIGNED_COLOR
