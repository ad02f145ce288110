from .task_validators import validate_task_dates, validate_task_overlap
from .material_validators import validate_material_request
from .worker_validators import validate_task_workers

__all__ = [
    "validate_task_dates",
    "validate_task_overlap",
    "validate_material_request",
    "validate_task_workers"
]
