# рабочих часов на одного работника в день
DAILY_HOURS = 8

# сколько дней показывает диаграмма-хронограмма начиная с сегодняшнего дня
TIMELINE_DAYS = 30

# папка и файлы с данными
DATA_DIR = "data"
PROJECTS_FILE = "projects.json"
USERS_FILE = "users.json"
MATERIALS_FILE = "materials.json"
TIMELINE_FILE = "timeline.json"

# порт локального сервера диаграммы Ганта
GANTT_PORT = 8050

# подпись для задач без работников
UNASSIGNED_LABEL = "Sin asignar"
