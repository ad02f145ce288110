from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, RootModel


class MaterialStatus(str, Enum):
    PENDING = "Pendiente"
    PREPARING = "En Preparación"
    READY = "Listo"


class MaterialRequest(BaseModel):
    id: str
    taskId: str
    projectId: str
    requestedByUserId: str
    items: List[str]
    status: MaterialStatus = MaterialStatus.PENDING
    createdAt: datetime
    handledByUserId: Optional[str] = None


MaterialRequests = RootModel[List[MaterialRequest]]
