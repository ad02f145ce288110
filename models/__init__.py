from .users import User, Users, UserRole, Specialty, SPECIALTY_COLORS, is_warehouse_worker
from .projects import Task, TaskDraft, TaskStatus, FINISHED_STATUSES, Project, ProjectType, Projects
from .materials import MaterialRequest, MaterialRequests, MaterialStatus
from .timeline import TimelineEntry, TimelineEntries, timeline_entry_for
