from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, RootModel


class UserRole(str, Enum):
    MASTER = "MASTER"
    OPERARIO = "OPERARIO"


class Specialty(str, Enum):
    INGENIERO = "Ingeniero"
    ELECTRICISTA = "Electricista"
    HERRERO = "Herrero"
    OFICIAL_MONTADOR = "Oficial Montador"
    MONTADOR = "Montador"
    CAMIONERO = "Camionero"
    ALMACEN = "Operario Almacén"


# цвета специальностей, используются только для отображения
SPECIALTY_COLORS = {
    Specialty.INGENIERO: "#dbeafe",
    Specialty.ELECTRICISTA: "#fef9c3",
    Specialty.HERRERO: "#e5e7eb",
    Specialty.OFICIAL_MONTADOR: "#ffedd5",
    Specialty.MONTADOR: "#fee2e2",
    Specialty.CAMIONERO: "#f3e8ff",
    Specialty.ALMACEN: "#d1fae5",
}


class User(BaseModel):
    id: str
    name: str
    username: str
    role: UserRole
    specialty: Optional[Specialty] = None

    @property
    def is_master(self) -> bool:
        return self.role == UserRole.MASTER

    @property
    def is_worker(self) -> bool:
        return self.role == UserRole.OPERARIO


def is_warehouse_worker(user: User) -> bool:
    """Работник склада - оператор со специальностью Operario Almacén."""
    return user.is_worker and user.specialty == Specialty.ALMACEN


Users = RootModel[List[User]]
