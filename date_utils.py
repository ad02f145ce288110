from datetime import date, timedelta
from math import ceil
from settings import DAILY_HOURS


def is_weekend(d: date) -> bool:
    """Проверяет, является ли дата выходным (суббота или воскресенье)."""
    return d.weekday() >= 5  # 5 = суббота, 6 = воскресенье


def parse_calendar_date(value: str) -> date:
    """
    Разбирает ISO-строку как календарную дату.

    Берётся только часть YYYY-MM-DD, без перевода во время и часовой пояс,
    поэтому дата не может "съехать" на день.
    """
    return date.fromisoformat(value.strip()[:10])


def calculate_working_days(start: date, end: date) -> int:
    """Вычисляет количество рабочих дней между двумя датами (включительно)."""
    delta = end - start
    working_days = 0
    for i in range(delta.days + 1):
        current_date = start + timedelta(days=i)
        if not is_weekend(current_date):
            working_days += 1
    return working_days


def days_needed(estimated_hours: float, worker_count: int) -> int:
    """Сколько рабочих дней займёт задача, если часы делятся поровну между работниками."""
    hours_per_worker = estimated_hours / max(worker_count, 1)
    return ceil(hours_per_worker / DAILY_HOURS)


def calculate_end_date(start_date: date, estimated_hours: float, worker_count: int) -> date:
    """
    Вычисляет дату окончания задачи с учетом:
    - общей трудоёмкости в часах
    - количества назначенных работников
    - выходных дней

    Один день работы означает, что задача заканчивается в день начала.
    Сама дата начала на выходной не проверяется.

    Args:
        start_date: дата начала задачи
        estimated_hours: трудоёмкость в часах на всех работников
        worker_count: количество работников (0 - дата начала не меняется)

    Returns:
        date: дата окончания задачи
    """
    if worker_count == 0:
        return start_date

    days_to_add = max(0, days_needed(estimated_hours, worker_count) - 1)

    end_date = start_date
    while days_to_add > 0:
        end_date += timedelta(days=1)
        # выходные проходим, но не считаем
        if not is_weekend(end_date):
            days_to_add -= 1

    return end_date
