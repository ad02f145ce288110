from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple
import plotly.figure_factory as ff
from dash import Dash, html, dcc
import webbrowser
from threading import Timer
from models import Project, User, SPECIALTY_COLORS
from settings import GANTT_PORT, TIMELINE_DAYS, UNASSIGNED_LABEL
from utils import project_span, users_by_id

UNASSIGNED_COLOR = "#808080"


def grid_column(start: date, end: date, today: date, days: int = TIMELINE_DAYS) -> Optional[Tuple[int, int]]:
    """
    Положение полосы задачи на хронограмме из `days` дней, начиная с сегодняшнего.

    Returns:
        (колонка, ширина) с нумерацией колонок с 1 или None, если полоса не видна
    """
    diff_start = (start - today).days
    diff_duration = (end - start).days + 1

    if diff_start + diff_duration < 0 or diff_start > days:
        return None

    column = max(1, diff_start + 1)
    span = min(days - diff_start, diff_duration)
    if span <= 0:
        return None
    return column, span


def project_grid_column(project: Project, today: date, days: int = TIMELINE_DAYS) -> Optional[Tuple[int, int]]:
    """Итоговая полоса проекта от первой до последней задачи."""
    span = project_span(project)
    if span is None:
        return None
    return grid_column(span[0], span[1], today, days)


def build_gantt_rows(projects: List[Project], users: List[User]) -> List[Dict]:
    """
    Строки диаграммы: по одной на каждого работника задачи, группировка по работникам,
    цвет по специальности.
    """
    user_dict = users_by_id(users)
    gantt_data = []

    for project in projects:
        for task in project.tasks:
            # Добавляем один день к конечной дате для корректного отображения
            finish = task.endDate + timedelta(days=1)
            assignees = [user_dict[uid] for uid in task.assignedUserIds if uid in user_dict]

            description = (f"Proyecto: {project.name} ({project.type.value})<br>"
                           f"Cliente: {project.client}<br>"
                           f"Tarea: {task.name}<br>"
                           f"Estado: {task.status.value}<br>"
                           f"Horas estimadas: {task.estimatedHours}")

            if not assignees:
                gantt_data.append({
                    'Task': UNASSIGNED_LABEL,
                    'Start': task.startDate.strftime('%Y-%m-%d'),
                    'Finish': finish.strftime('%Y-%m-%d'),
                    'Description': description,
                    'Resource': UNASSIGNED_LABEL,
                    'Complete': 100,
                    'Color': UNASSIGNED_COLOR
                })
                continue

            for worker in assignees:
                resource = worker.specialty.value if worker.specialty else UNASSIGNED_LABEL
                gantt_data.append({
                    'Task': worker.name,
                    'Start': task.startDate.strftime('%Y-%m-%d'),
                    'Finish': finish.strftime('%Y-%m-%d'),
                    'Description': description,
                    'Resource': resource,
                    'Complete': 100,
                    'Color': SPECIALTY_COLORS.get(worker.specialty, UNASSIGNED_COLOR)
                })

    return gantt_data


def create_gantt_chart(projects: List[Project], users: List[User], port: int = GANTT_PORT) -> None:
    """
    Создает интерактивную диаграмму Ганта по задачам проектов и показывает её в браузере.

    Args:
        projects: проекты с задачами
        users: пользователи
        port: порт для локального сервера
    """
    gantt_data = build_gantt_rows(projects, users)
    if not gantt_data:
        print("Нет задач для отображения")
        return

    fig = ff.create_gantt(gantt_data,
                          colors=dict((row['Resource'], row['Color']) for row in gantt_data),
                          index_col='Resource',
                          show_colorbar=True,
                          group_tasks=True,
                          showgrid_x=True,
                          showgrid_y=True)

    fig.update_layout(
        title='Cronograma de Trabajo',
        xaxis_title='Fecha',
        yaxis_title='Operarios',
        height=max(len(set(row['Task'] for row in gantt_data)) * 100, 600),
        showlegend=True
    )

    app = Dash(__name__)
    app.layout = html.Div([
        html.Div(style={'width': '100%', 'height': '100vh'}, children=[
            dcc.Graph(figure=fig, style={'height': '100%'})
        ])
    ])

    def open_browser():
        webbrowser.open_new(f'http://localhost:{port}/')

    # Открываем браузер через 1 секунду после запуска сервера
    Timer(1, open_browser).start()

    print(f"\nЗапускаем сервер на http://localhost:{port}")
    print("Для завершения работы нажмите Ctrl+C")
    app.run(debug=False, port=port)
