# cadastro_usuarios/entities/user.py
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class UserStatus(str, Enum):
    ACTIVE = "ativo"
    INACTIVE = "inativo"

    def __str__(self) -> str:
        return self.value


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    # mutável apenas em status (via UserService.deactivate_user)
    id: str
    name: str
    email: str
    age: int
    is_admin: bool = False
    status: UserStatus = UserStatus.ACTIVE
    created_at: datetime = field(default_factory=_utcnow)

    @property
    def is_active(self) -> bool:
        return self.status is UserStatus.ACTIVE
